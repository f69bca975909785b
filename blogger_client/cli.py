import argparse
import logging
import sys

from blogger_client.app import list_entries, run


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Blogger entry editor")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List blogs and their entries instead of editing.",
    )
    parser.add_argument("--title", help="Title of the entries to rename.")
    parser.add_argument("--new-title", help="Title to give the matching entries.")
    parser.add_argument(
        "--blog",
        type=int,
        default=0,
        help="Index of the blog to edit (default 0).",
    )
    args = parser.parse_args(argv)
    if not args.list and (args.title is None or args.new_title is None):
        parser.error("--title and --new-title are required unless --list is given")
    return args


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        args = parse_args(sys.argv[1:])
        if args.list:
            message = list_entries()
        else:
            message = run(
                title=args.title,
                new_title=args.new_title,
                blog_index=args.blog,
            )
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
