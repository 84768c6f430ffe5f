from __future__ import annotations

# Contact export layout with two email and two phone slots per person.
CONTACT_COLUMNS = [
    "FirstName",
    "LastName",
    "Email1",
    "Email2",
    "Phone1",
    "Phone2",
    "Zip",
]
