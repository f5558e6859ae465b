"""
This module defines the configuration used by the course finder, so the selector
and the site it talks to are not baked into the code.
"""
import soupsieve
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from buscador.errors import ValidationError

DEFAULT_SELECTOR = "span.card-curso__nome"
DEFAULT_BASE_URL = "https://www.alura.com.br"


class FinderConfig(BaseModel):
    """
    Everything a CourseFinder needs to know about the page it scrapes.
    The defaults point at the Alura course listing, a timeout of None means
    the request waits forever and check_status=False parses whatever body
    comes back, error pages included.
    """
    model_config = ConfigDict(frozen=True)

    selector: str = DEFAULT_SELECTOR
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = 15.0
    check_status: bool = True

    @field_validator("selector")
    @classmethod
    def selector_must_be_valid_css(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("selector must not be empty")
        try:
            soupsieve.compile(value.strip())
        except soupsieve.SelectorSyntaxError as error:
            raise ValueError(f"selector is not valid CSS: {error}") from error
        return value.strip()

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be a positive number of seconds or None")
        return value

    @classmethod
    def build(cls, **values) -> "FinderConfig":
        """Like the constructor, but raises our own ValidationError so callers only catch ScraperError."""
        try:
            return cls(**values)
        except PydanticValidationError as error:
            raise ValidationError(f"Invalid finder configuration: {error}") from error
