"""Command-line interface for treesketch.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Root directory not accessible
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Scan a directory
    $ treesketch /path/to/dir

    # Save and reload
    $ treesketch -f json -o tree.json /path/to/dir
    $ treesketch --load tree.json -f list
"""

import logging
import sys
from typing import Optional, Sequence

from treesketch.cli.argparser import collect_ignore_names, create_parser, validate_args
from treesketch.exceptions import RootNotAccessibleError
from treesketch.file_system_tree.tree_builder import build_tree
from treesketch.serialization import dumps_tree, load_tree
from treesketch.tree_store.store import TreeStore
from treesketch.treesketch import render


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the treesketch command-line interface.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)

    try:
        if args.load is not None:
            tree = load_tree(args.load)
        else:
            tree = build_tree(
                args.directory,
                collect_ignore_names(args),
                use_ignore_file=args.use_gitignore,
                ignore_file_name=args.ignore_file_name,
            )
        store = TreeStore(tree)

        if args.format == "json":
            output = dumps_tree(store.root) + "\n"
        else:
            output = render(store.root, args.format)

        if args.output:
            args.output.write_text(output, encoding="utf-8")
        else:
            sys.stdout.write(output)
            sys.stdout.flush()
    except BrokenPipeError:
        sys.exit(141)
    except RootNotAccessibleError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
