#!/usr/bin/env python3
"""
Command-line interface for Inventory Tracker
"""
import sys
import argparse
from typing import Any, Callable

from . import __version__, display
from .models import LOW_STOCK_THRESHOLD
from .store import Inventory
from .validation import (
    ValidationResult,
    category_prompt,
    validate_category,
    validate_item_id,
    validate_price,
    validate_quantity,
)


MENU = """Inventory Management System
1. Add Item
2. Update Item
3. Remove Item
4. Display Items by Category
5. Display All Items
6. Search Item
7. Display Low Stock Items
8. Sort Items
9. Exit"""

EXIT_CHOICE = '9'


def ask(prompt: str, validator: Callable[[str], ValidationResult]) -> Any:
    """Prompt until the validator accepts the answer, then return its value."""
    while True:
        result = validator(input(prompt))
        if result.ok:
            return result.value
        print(f"❌ {result.reason}")


def add_command(inventory: Inventory) -> None:
    category = ask(category_prompt(), validate_category)
    item_id = ask("Enter Item ID: ", validate_item_id)
    name = input("Enter Item Name: ").strip()
    quantity = ask("Enter Quantity: ", validate_quantity)
    price = ask("Enter Price: ", validate_price)

    result = inventory.add_item(category, item_id, name, quantity, price)
    if "error" in result:
        print(f"❌ {result['error']}")
        return
    if result.get("warning"):
        print(f"⚠️  {result['warning']}")
    print(f"✅ {result['message']}")


def update_command(inventory: Inventory) -> None:
    if inventory.is_empty():
        print(display.NO_ITEMS)
        return

    item_id = ask("Enter Item ID to update: ", validate_item_id)
    if inventory.find_item_by_id(item_id) is None:
        print("Item not found!")
        return

    choice = input("What would you like to update?\n1. Quantity\n2. Price\nEnter your choice: ").strip()
    if choice == '1':
        result = inventory.update_item(item_id, 'quantity', ask("Enter new quantity: ", validate_quantity))
    elif choice == '2':
        result = inventory.update_item(item_id, 'price', ask("Enter new price: ", validate_price))
    else:
        print("Invalid choice!")
        return

    if "error" in result:
        print(f"❌ {result['error']}")
    else:
        print(f"✅ {result['message']}")


def remove_command(inventory: Inventory) -> None:
    if inventory.is_empty():
        print(display.NO_ITEMS)
        return

    item_id = ask("Enter Item ID to remove: ", validate_item_id)
    result = inventory.remove_item(item_id)
    if "error" in result:
        print(result['error'])
        return

    print(f"✅ {result['message']}")
    if result['removed'] > 1:
        print(f"   ({result['removed']} items shared the ID {result['item'].id})")


def category_command(inventory: Inventory) -> None:
    result = inventory.items_by_category(input(category_prompt()))
    if "error" in result:
        print(f"❌ {result['error']}")
        return

    if not result['items']:
        print(display.no_items_in_category(result['category']))
        return
    print(display.format_table(result['items']))


def list_command(inventory: Inventory) -> None:
    if inventory.is_empty():
        print(display.EMPTY_INVENTORY)
        return
    print(display.format_table(inventory.all_items()))


def search_command(inventory: Inventory) -> None:
    if inventory.is_empty():
        print(display.NOTHING_TO_SEARCH)
        return

    item_id = ask("Enter Item ID to search: ", validate_item_id)
    result = inventory.search_item(item_id)
    if "error" in result:
        print(result['error'])
        return
    print(display.format_table([result['item']]))


def low_stock_command(inventory: Inventory, threshold: int = LOW_STOCK_THRESHOLD) -> None:
    items = inventory.low_stock_items(threshold)
    if not items:
        print(display.NO_LOW_STOCK)
        return
    print("Low stock items:")
    print(display.format_table(items))


def sort_command(inventory: Inventory) -> None:
    order = input("Sort by price:\n1. Ascending\n2. Descending\nEnter your choice: ")
    result = inventory.sort_items(order)
    if "error" in result:
        print(f"❌ {result['error']}")
        return
    print(f"✅ {result['message']}")


def run_menu(inventory: Inventory, low_stock_threshold: int = LOW_STOCK_THRESHOLD) -> int:
    """Run the interactive menu until the user picks Exit."""
    commands = {
        '1': add_command,
        '2': update_command,
        '3': remove_command,
        '4': category_command,
        '5': list_command,
        '6': search_command,
        '7': lambda inv: low_stock_command(inv, low_stock_threshold),
        '8': sort_command,
    }

    try:
        while True:
            print(MENU)
            choice = input("Enter your choice: ").strip()

            if choice == EXIT_CHOICE:
                print("Exiting program.")
                break

            command = commands.get(choice)
            if command is None:
                print("Invalid choice. Please try again.")
            else:
                command(inventory)

            print()
    except (KeyboardInterrupt, EOFError):
        print("\n\n👋 Exiting program.")

    issues = inventory.validate_inventory()
    if issues:
        print(f"\n⚠️  Found {len(issues)} issue(s) in this session's inventory:")
        for issue in issues[:20]:  # Limit to first 20
            print(f"   {issue}")
        if len(issues) > 20:
            print(f"   ... and {len(issues) - 20} more")

    return 0


def non_negative_int(value: str) -> int:
    """argparse type for options that must be a non-negative integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must not be negative")
    return number


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser_cli = argparse.ArgumentParser(
        prog="inventory-tracker",
        description="Inventory Tracker - Manage an in-memory inventory from the console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start an interactive session
  inventory-tracker

  # Treat items with fewer than 10 units as low stock
  inventory-tracker --low-stock-threshold 10

  # Refuse to add an item whose ID is already in use
  inventory-tracker --unique-ids

Nothing is saved: all items are discarded when the program exits.
        """
    )
    parser_cli.add_argument('--low-stock-threshold', type=non_negative_int, default=LOW_STOCK_THRESHOLD,
                            help=f'Quantity below which an item is low stock (default: {LOW_STOCK_THRESHOLD})')
    parser_cli.add_argument('--unique-ids', action='store_true',
                            help='Reject items whose ID is already in the inventory')
    parser_cli.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser_cli.parse_args(argv)

    inventory = Inventory(unique_ids=args.unique_ids)
    return run_menu(inventory, args.low_stock_threshold)


if __name__ == '__main__':
    sys.exit(main())
