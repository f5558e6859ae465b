from buscador.finder import CourseFinder
from buscador.http_client import HttpClient
from buscador.models import DEFAULT_BASE_URL
from buscador.errors import (
    ScraperError,
    NetworkError,
    HTTPStatusError
)
from rich.console import Console

console = Console()

COURSES_PATH = "/cursos-online-programacao/php"


def format_course(course: str) -> str:
    return f"• {course}"


def main() -> int:
    with HttpClient(DEFAULT_BASE_URL) as client:
        finder = CourseFinder(client)
        try:
            with console.status(f"Searching courses at {client.resolve(COURSES_PATH)}..."):
                courses = finder.search(COURSES_PATH)
        # Either Timeout or Connection error or HTTP error
        except (NetworkError, HTTPStatusError) as error:
            console.print(f"Network/HTTP error: {error}", style="bold yellow")
            return 1
        # Catch all other scraper related errors
        except ScraperError as error:
            console.print(f"Scraper error: {error}", style="bold red")
            return 1

    for course in courses:
        # Course names can contain [brackets], don't let rich read them as markup
        console.print(format_course(course), markup=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
