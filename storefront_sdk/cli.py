# storefront_sdk/cli.py
import argparse
import os
import shlex
from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from .client import StorefrontClient, StorefrontError

console = Console()

DEFAULT_BASE_URL = os.getenv("STOREFRONT_URL", "http://127.0.0.1:3000")

COMMANDS = (
    "list-products", "create-product", "update-product", "delete-product",
    "list-customers", "create-customer", "list-reviews", "create-review",
)

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title="Products", box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Price", justify="right")
    table.add_column("Category")
    for p in products:
        table.add_row(str(p.get("id")), str(p.get("name")), f"${p.get('price')}", str(p.get("category")))
    console.print(table)


def show_customers(customers: List[Dict[str, Any]]):
    if not customers:
        console.print("[italic yellow]No customers found[/italic yellow]")
        return

    table = Table(title="Customers", box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Email")
    for c in customers:
        table.add_row(str(c.get("id")), str(c.get("name") or "-"), str(c.get("email") or "-"))
    console.print(table)


def show_reviews(reviews: List[Dict[str, Any]]):
    if not reviews:
        console.print("[italic yellow]No reviews found[/italic yellow]")
        return

    table = Table(title="Reviews", box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Product", justify="right")
    table.add_column("Content")
    for r in reviews:
        table.add_row(str(r.get("id")), str(r.get("productId") or "-"), str(r.get("content") or ""))
    console.print(table)


def show_created(kind: str, record: Dict[str, Any]):
    body = "\n".join(f"[bold]{k}[/bold]: {v}" for k, v in record.items())
    console.print(Panel(body, title=f"{kind} saved", style="green"))


# ---------------------------
# Argument parsing
# ---------------------------
def _number(text: str):
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront-cli", description="Storefront API client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Server address")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Only products in this category")

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--price", type=_number, required=True)
    cp.add_argument("--category", required=True)

    up = subparsers.add_parser("update-product", help="Change fields of a product")
    up.add_argument("--id", type=int, required=True, dest="product_id")
    up.add_argument("--name")
    up.add_argument("--price", type=_number)
    up.add_argument("--category")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--id", type=int, required=True, dest="product_id")

    subparsers.add_parser("list-customers", help="List customers")
    cc = subparsers.add_parser("create-customer", help="Create a customer")
    cc.add_argument("--name")
    cc.add_argument("--email")

    subparsers.add_parser("list-reviews", help="List reviews")
    cr = subparsers.add_parser("create-review", help="Review a product")
    cr.add_argument("--product-id", type=int, required=True)
    cr.add_argument("--content", required=True)

    subparsers.add_parser("shell", help="Interactive session with command completion")
    return parser


# ---------------------------
# Command dispatch
# ---------------------------
def run_command(c: StorefrontClient, args: argparse.Namespace) -> None:
    if args.command == "list-products":
        show_products(c.list_products(args.category))
    elif args.command == "create-product":
        show_created("Product", c.create_product(args.name, args.price, args.category))
    elif args.command == "update-product":
        show_created("Product", c.update_product(
            args.product_id, name=args.name, price=args.price, category=args.category
        ))
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        console.print(f"[green]Deleted product {args.product_id}[/green]")
    elif args.command == "list-customers":
        show_customers(c.list_customers())
    elif args.command == "create-customer":
        show_created("Customer", c.create_customer(args.name, args.email))
    elif args.command == "list-reviews":
        show_reviews(c.list_reviews())
    elif args.command == "create-review":
        show_created("Review", c.create_review(args.product_id, args.content))


def interactive_shell(c: StorefrontClient, parser: argparse.ArgumentParser) -> None:
    commands = list(COMMANDS)
    completer = WordCompleter(commands + ["help", "exit"], ignore_case=True)
    console.print(Panel(f"Connected to [bold cyan]{c.base_url}[/bold cyan]. Type 'help' or 'exit'.", style="blue"))

    while True:
        try:
            line = prompt("storefront> ", completer=completer, style=custom_style).strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        if line in ("exit", "quit"):
            break
        if line == "help":
            console.print(", ".join(commands))
            continue
        try:
            args = parser.parse_args(["--base-url", c.base_url] + shlex.split(line))
        except SystemExit:
            continue
        if args.command == "shell":
            continue
        try:
            run_command(c, args)
        except StorefrontError as e:
            console.print(f"[bold red]{e}[/bold red]")


def main(argv: Optional[Sequence[str]] = None, client: Optional[StorefrontClient] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    c = client or StorefrontClient(base_url=args.base_url)

    if args.command == "shell":
        interactive_shell(c, parser)
        return 0
    try:
        run_command(c, args)
    except StorefrontError as e:
        console.print(f"[bold red]{e}[/bold red]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
