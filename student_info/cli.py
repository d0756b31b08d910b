"""
cli.py - interactive menu for the student information system

Menu:
 1) Add  2) View  3) Search by roll no  4) Update name  5) Delete  6) Exit
 7) Search by name  8) Export (CSV/PDF)
"""

import logging

from . import config
from .export import export_records
from .store import NOT_FOUND_MESSAGE, Store, NoRecordsError, RecordNotFoundError, StudentInfoError

EXIT_CHOICE = "6"


# -------------------------
# Input helpers
# -------------------------
def read_roll_no(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("Roll No must be a number.")


def print_menu():
    print("\n--- Student Information System ---")
    print("1. Add Student")
    print("2. View Students")
    print("3. Search Student")
    print("4. Update Student")
    print("5. Delete Student")
    print("6. Exit")
    print("7. Search by Name")
    print("8. Export Students (CSV/PDF)")


# Flows
def add_flow(store: Store):
    roll = read_roll_no("Enter Roll No: ")
    name = input("Enter Name: ")
    dept = input("Enter Department: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    store.add(roll, name, dept, email, phone)
    print("Student Added Successfully!")


def view_flow(store: Store):
    try:
        records = store.view()
    except NoRecordsError as e:
        print(e)
        return
    for r in records:
        print(r.display())


def search_flow(store: Store):
    roll = read_roll_no("Enter Roll No to Search: ")
    r = store.find_by_roll(roll)
    if r is None:
        print(NOT_FOUND_MESSAGE)
    else:
        print(r.display())


def update_flow(store: Store):
    roll = read_roll_no("Enter Roll No to Update: ")
    if store.find_by_roll(roll) is None:
        print(NOT_FOUND_MESSAGE)
        return
    new_name = input("Enter New Name: ")
    store.update_name(roll, new_name)
    print("Student Updated!")


def delete_flow(store: Store):
    roll = read_roll_no("Enter Roll No to Delete: ")
    try:
        store.delete(roll)
    except RecordNotFoundError as e:
        print(e)
        return
    print("Student Deleted!")


def search_name_flow(store: Store):
    q = input("Name fragment: ").strip()
    res = store.search_by_name(q)
    if not res:
        print("No matches.")
        return
    for r in res:
        print(f"{r.roll_no} | {r.name} | {r.department} | {r.email} | {r.phone}")


def export_flow(store: Store):
    fmt = input("Format (csv/pdf): ").strip().lower()
    path = export_records(list(store), fmt)
    print(f"{fmt.upper()} saved to {path}")


FLOWS = {
    "1": add_flow,
    "2": view_flow,
    "3": search_flow,
    "4": update_flow,
    "5": delete_flow,
    "7": search_name_flow,
    "8": export_flow,
}


def main_menu(store: Store):
    while True:
        print_menu()
        try:
            ch = input("Enter choice: ").strip()
            if ch == EXIT_CHOICE:
                print("Exiting...")
                break
            flow = FLOWS.get(ch)
            if flow is None:
                print("Invalid Choice!")
                continue
            flow(store)
        except EOFError:
            print("\nExiting...")
            break
        except (StudentInfoError, ValueError, OSError) as e:
            print("Error:", e)


# Entry point
def main(path: str = config.DATA_FILE):
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    store = Store(path)
    main_menu(store)


if __name__ == "__main__":
    main()
