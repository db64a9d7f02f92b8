#!/usr/bin/env python3
"""Movie ratings CLI — rate movies, look up averages, manage the catalog."""

import sys
import json
import logging
import argparse

from .config import CATALOG_PATH, LOG_LEVEL, LOG_FORMAT

MENU = """
Choose an option:
1. Add Rating
2. Get Average Rating
3. Get Top Rated Movie
4. Get All Ratings
5. Add a Movie
6. Delete a Movie
7. Exit
"""


def setup_logging(log_level: str = LOG_LEVEL):
    """Configure logging for the whole application (diagnostics go to stderr)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _parse_rating(text: str):
    """int if the text is a whole number ("5" or "5.0"), else the raw text (rejected later)."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return text
    if value.is_integer():
        return int(value)
    return text


def _split_query_and_rating(words: list[str]) -> tuple[str, object] | None:
    """'the matrix 5' -> ('the matrix', 5). The last word is always the rating."""
    if len(words) < 2:
        return None
    return " ".join(words[:-1]), _parse_rating(words[-1])


def _emit(result, args):
    """Print a headless result; exit 1 on failure."""
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        print(f"  + {result.message}")
    else:
        print(f"  x {result.message}")
    if not result.ok:
        sys.exit(1)


def _save(service, args):
    from .storage import save_catalog
    save_catalog(service.store, args.catalog)


# -- headless subcommands --

def cmd_rate(args, service):
    """Add a rating: `rate <id-or-title...> <rating>`."""
    parsed = _split_query_and_rating(args.words)
    if parsed is None:
        print("  x Usage: movieratings rate <id-or-title> <rating>")
        sys.exit(1)
    query, rating = parsed
    result = service.add_rating(query, rating, headless=True)
    if result.ok:
        _save(service, args)
    _emit(result, args)


def cmd_average(args, service):
    _emit(service.get_average(" ".join(args.query), headless=True), args)


def cmd_top(args, service):
    _emit(service.get_top_rated(headless=True), args)


def cmd_ratings(args, service):
    _emit(service.get_all_ratings(" ".join(args.query), headless=True), args)


def cmd_add(args, service):
    result = service.add_entry(" ".join(args.title), headless=True)
    if result.ok:
        _save(service, args)
    _emit(result, args)


def cmd_delete(args, service):
    result = service.delete_entry(" ".join(args.query), headless=True)
    if result.ok:
        _save(service, args)
    _emit(result, args)


def cmd_list(args, service):
    """Show every movie with its ratings."""
    from .display import format_entry_line

    result = service.list_all(headless=True)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    entries = result.payload["entries"]
    if not entries:
        print("Catalog is empty.")
        return
    print(f"-- Movies ({len(entries)}):\n")
    for entry in entries:
        print(f"  {format_entry_line(entry)}")
    print()


def cmd_bench(args, service):
    """Time random headless operations against the loaded catalog."""
    from .bench import run_bench

    print(f"-- Benchmark: {args.n} calls per operation\n")
    try:
        run_bench(service, args.n, seed=args.seed)
    except ValueError as e:
        print(f"  x {e}")
        sys.exit(1)


# -- interactive menu --

def _menu_add_rating(service, input_fn):
    answer = input_fn("Enter movie ID or title and rating (e.g. 5A2B3DE4 5): ")
    parsed = _split_query_and_rating(answer.split())
    if parsed is None:
        print("  x Please enter a movie ID or title followed by a rating.")
        return
    query, rating = parsed
    service.add_rating(query, rating)


def _menu_average(service, input_fn):
    service.get_average(input_fn("Enter partial movie ID or title: "))


def _menu_top(service, input_fn):
    service.get_top_rated()


def _menu_all_ratings(service, input_fn):
    service.get_all_ratings(input_fn("Enter partial movie ID or title: "))


def _menu_add_movie(service, input_fn):
    service.add_entry(input_fn("Enter new movie title: "))


def _menu_delete(service, input_fn):
    service.delete_entry(input_fn("Enter partial movie ID or title to delete: "))


MENU_ACTIONS = {
    "1": _menu_add_rating,
    "2": _menu_average,
    "3": _menu_top,
    "4": _menu_all_ratings,
    "5": _menu_add_movie,
    "6": _menu_delete,
}


def _show_menu(service):
    from .display import format_entry_line

    entries = service.list_all(headless=True).payload["entries"]
    print("\nCurrent Movies:")
    if not entries:
        print("  (none)")
    for entry in entries:
        print(f"  {format_entry_line(entry)}")
    print(MENU)


def run_menu(service, catalog_path: str, input_fn=input):
    """Numbered menu loop. Option 7 saves and exits; end of input exits without saving."""
    from .storage import save_catalog

    while True:
        _show_menu(service)
        try:
            option = input_fn("> ").strip().rstrip(".")
            if option == "7":
                save_catalog(service.store, catalog_path)
                print("  + Movies saved to disk.")
                break
            action = MENU_ACTIONS.get(option)
            if action is None:
                print("  x Invalid option, please choose again.")
                continue
            action(service, input_fn)
        except EOFError:
            break
    print("Exiting movie rating system.")


def cmd_menu(args, service):
    run_menu(service, args.catalog)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="movieratings", description="Movie ratings catalog CLI")
    parser.add_argument("--catalog", default=CATALOG_PATH, help=f"Catalog JSON file (default: {CATALOG_PATH})")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("menu", help="Interactive menu (default)")

    rate_p = subparsers.add_parser("rate", help="Add a rating to a movie")
    rate_p.add_argument("words", nargs="+", metavar="ID_OR_TITLE... RATING")

    avg_p = subparsers.add_parser("average", help="Average rating of a movie")
    avg_p.add_argument("query", nargs="+")

    subparsers.add_parser("top", help="Top rated movie")

    ratings_p = subparsers.add_parser("ratings", help="All ratings of a movie")
    ratings_p.add_argument("query", nargs="+")

    add_p = subparsers.add_parser("add", help="Add a movie")
    add_p.add_argument("title", nargs="+")

    del_p = subparsers.add_parser("delete", help="Delete a movie")
    del_p.add_argument("query", nargs="+")

    subparsers.add_parser("list", help="List all movies")

    bench_p = subparsers.add_parser("bench", help="Time random headless operations (never saves)")
    bench_p.add_argument("-n", type=int, default=10000)
    bench_p.add_argument("--seed", type=int, default=None)

    for sub in (rate_p, avg_p, ratings_p, add_p, del_p, subparsers.choices["top"], subparsers.choices["list"]):
        sub.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser


def main(argv=None):
    from .errors import CatalogFileError
    from .selection import InteractiveSelection
    from .service import CatalogService
    from .storage import load_catalog

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        store = load_catalog(args.catalog)
    except CatalogFileError as e:
        print(f"  x {e}")
        sys.exit(1)

    service = CatalogService(store, selection=InteractiveSelection())

    handlers = {
        None: cmd_menu,
        "menu": cmd_menu,
        "rate": cmd_rate,
        "average": cmd_average,
        "top": cmd_top,
        "ratings": cmd_ratings,
        "add": cmd_add,
        "delete": cmd_delete,
        "list": cmd_list,
        "bench": cmd_bench,
    }
    handlers[args.command](args, service)


if __name__ == "__main__":
    main()
