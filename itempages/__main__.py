import sys

import click
import tabulate

from .pages import PaginatedCollection
from .repl import parse_args, ReplSyntaxError
from .scorecard import ScoreCard

HELP = ("This is the REPL, and the following commands are available.\n"
        "\n"
        "list              List items in the current page\n"
        "next              Go forward one page, and list\n"
        "prev              Go backward one page, and list\n"
        "first             Go to the first page, and list\n"
        "last              Go to the last page, and list\n"
        "add <item>        Add an item (quote it if it has spaces)\n"
        "remove <index>    Remove the item with index <index>\n"
        "pagesize <n>      Show <n> items per page\n"
        "stats             Show item length statistics")


def error(message):
    print(f"ERROR: {message}", file=sys.stderr)

def int_safe(v):
    try:
        return int(v)
    except ValueError:
        error(f"{v!r} is not an integer value")
        return None

def read_items(stream):
    return [line.strip() for line in stream if line.strip()]

def print_page(pages):
    page = pages.current()

    if page is None:
        print("(No items)" if pages.n_pages == 0
              else f"(Page {pages.current_page + 1} is gone, try first or last)")
        return

    rows = [(i, item) for i, item in enumerate(page, start=pages.current_offset)]

    print(tabulate.tabulate(rows, headers=['#', 'item']))
    print(f"(Page {pages.current_page + 1}/{pages.n_pages})")

def print_stats(pages):
    card = ScoreCard()

    def collect(item, _):
        card.add(len(item))

    pages.each(collect)

    if not card.size():
        print("(No items)")
        return

    print(tabulate.tabulate([(card.size(), card.min, card.max, f'{card.average:.1f}')],
                            headers=['items', 'shortest', 'longest', 'average']))

def run(pages, prompt='> '):
    while True:
        try:
            args = parse_args(input(prompt))
        except EOFError:
            break
        except ReplSyntaxError as e:
            error(str(e))
            continue

        if len(args) < 1:
            continue

        match args:
            case ['help']:
                print(HELP)
            case ['list']:
                print_page(pages)
            case ['next']:
                if pages.next() is None:
                    error("No next page")
                else:
                    print_page(pages)
            case ['prev']:
                if pages.previous() is None:
                    error("No previous page")
                else:
                    print_page(pages)
            case ['first']:
                pages.first()
                print_page(pages)
            case ['last']:
                pages.last()
                print_page(pages)
            case ['add', item]:
                if item in pages:
                    error(f"{item!r} is already listed")
                else:
                    pages.add(item)
            case ['remove', index]:
                if (i := int_safe(index)) is None:
                    continue

                if not 0 <= i < pages.size():
                    error(f"Index {i} is out of bounds, max {pages.size() - 1}")
                    continue

                pages.remove(pages.get(i))
            case ['pagesize', size]:
                if (n := int_safe(size)) is None:
                    continue

                if n < 1:
                    error("Page size must be at least 1")
                    continue

                pages.page_size = n
                pages.first()
                print_page(pages)
            case ['stats']:
                print_stats(pages)
            case [('add' | 'remove' | 'pagesize') as cmd, *rest]:
                if rest:
                    error(f"Too many arguments to {cmd}; quote items with spaces")
                else:
                    error(f"Nothing to {cmd}, forgot an argument?")
            case [wrong_cmd, *_]:
                error(f"Not a valid command {wrong_cmd}; try again.")

@click.command()
@click.argument('source', type=click.File('r'))
@click.option('--page-size', '-n', type=click.IntRange(min=1), default=25, show_default=True,
              help='Number of items per page.')
def main(source, page_size):
    """Browse the lines of SOURCE page by page."""
    pages = PaginatedCollection(read_items(source), page_size=page_size)

    print_page(pages)
    run(pages)

if __name__ == "__main__":
    main()
