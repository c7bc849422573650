"""Example: using the store directly (no Flask).

Controllers are a thin layer; everything below is what the web UI does.
"""

from src.classroom_attendance.classroom_attendance.store import build_store


def main():
    store = build_store(enforce_student_refs=True)

    store.register(name="Ms. Lan", email="lan@example.com", password="secret")
    print("logged in as", store.login("lan@example.com", "secret"))

    for name, roll in [("An", "01"), ("Binh", "02")]:
        store.add_student(name, roll, "5A")

    entries = [{"studentId": s.student_id, "present": s.name == "An"} for s in store.list_students_by_class("5A")]
    store.record_attendance("2024-01-10", "5A", entries)

    for row in store.report_rows("2024-01-10", "all"):
        print(row.date, row.class_name, row.roll_number, row.student_name, row.status_label)


if __name__ == "__main__":
    main()
