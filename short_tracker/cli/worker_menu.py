# cli/worker_menu.py
from short_tracker.data.data_manager import load_workers, add_worker, remove_worker
from short_tracker.exceptions import InvalidWorkerName
from short_tracker.utils.input_handler import get_input


def worker_menu(store):
    while True:
        print("\n[Team Members]")
        print("1. List members")
        print("2. Add member")
        print("3. Remove member")
        print("0. Back")

        choice = get_input("Choice")

        if choice == "1":
            show_workers(store)
        elif choice == "2":
            add_worker_prompt(store)
        elif choice == "3":
            remove_worker_prompt(store)
        elif choice == "0":
            break
        else:
            print("Invalid choice.")


def show_workers(store):
    workers = load_workers(store)
    print("\n[Members]")
    if not workers:
        print("(none)")
    for w in workers:
        print(f"{w.id} | {w.name}")


def add_worker_prompt(store):
    workers = load_workers(store)
    name = get_input("Name")
    try:
        w = add_worker(store, workers, name)
    except InvalidWorkerName:
        print("Name cannot be empty.")
        return
    print(f"Added {w.name} (id {w.id}).")


def remove_worker_prompt(store):
    workers = load_workers(store)
    raw = get_input("Member ID to remove")
    if not raw.isdigit():
        print("Enter a numeric ID.")
        return
    worker_id = int(raw)
    w = next((x for x in workers if x.id == worker_id), None)
    if not w:
        print("No member with that ID.")
        return
    if get_input(f"Remove {w.name}? (y/n)", default="n").lower() != "y":
        return
    remove_worker(store, workers, worker_id)
    print(f"Removed {w.name}. Past entries are kept as they were.")
