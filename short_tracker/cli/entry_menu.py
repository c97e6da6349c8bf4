# cli/entry_menu.py
from datetime import date

from short_tracker.data.data_manager import (
    load_workers, load_entries, save_entry, get_entry, delete_entry
)
from short_tracker.logic.penalty import split_daily_penalty
from short_tracker.models.day_entry import DayEntry
from short_tracker.utils.date_helper import date_key, parse_date_key, format_date_long
from short_tracker.utils.format_utils import format_currency
from short_tracker.utils.input_handler import get_input
from short_tracker.utils.parse_utils import parse_amount, parse_id_list


def entry_menu(store):
    while True:
        print("\n[Daily Entries]")
        print("1. Enter / overwrite a day")
        print("2. Show a day")
        print("3. Delete a day")
        print("0. Back")

        choice = get_input("Choice")

        if choice == "1":
            enter_day(store)
        elif choice == "2":
            show_day(store)
        elif choice == "3":
            delete_day(store)
        elif choice == "0":
            break
        else:
            print("Invalid choice.")


def _ask_date_key() -> str:
    while True:
        raw = get_input("Date (YYYY-MM-DD)", default=date_key(date.today()))
        try:
            return date_key(parse_date_key(raw))
        except ValueError:
            print("Use the YYYY-MM-DD format.")


def describe_entry(entry: DayEntry) -> list[str]:
    split = split_daily_penalty(entry.unrecorded, entry.short, len(entry.attendance))
    return [
        f"Unrecorded: {format_currency(entry.unrecorded)} (penalty {format_currency(split.unrecorded_penalty)})",
        f"Short: {format_currency(entry.short)} (penalty {format_currency(split.short_penalty)})",
        f"Total penalty: {format_currency(split.total_penalty)}",
        f"Attendees: {len(entry.attendance)}, share {format_currency(split.per_person_share)} / person",
    ]


def enter_day(store):
    workers = load_workers(store)
    entries = load_entries(store)
    key = _ask_date_key()

    existing = get_entry(entries, key)
    default_ids = existing.attendance if existing else [w.id for w in workers]

    unrecorded = parse_amount(get_input("Unrecorded amount", default="0"))
    short = 0.0
    if unrecorded <= 0:
        short = parse_amount(get_input("Short amount", default="0"))

    print("Members: " + ", ".join(f"{w.id}={w.name}" for w in workers))
    ids_text = get_input("Attendee IDs (comma separated)", default=",".join(str(i) for i in default_ids))
    attendance = parse_id_list(ids_text)

    entry = DayEntry(unrecorded=unrecorded, short=short, attendance=attendance)
    for line in describe_entry(entry):
        print("  " + line)
    save_entry(store, entries, key, entry)
    print(f"{key} saved.")


def show_day(store):
    entries = load_entries(store)
    key = _ask_date_key()
    entry = get_entry(entries, key)
    print(f"\n[{format_date_long(parse_date_key(key))}]")
    if entry is None:
        print("No entry.")
        return
    for line in describe_entry(entry):
        print("  " + line)


def delete_day(store):
    entries = load_entries(store)
    key = _ask_date_key()
    if delete_entry(store, entries, key):
        print(f"{key} deleted.")
    else:
        print("Nothing to delete.")
