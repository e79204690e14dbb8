import random

from django.db import transaction

from .models import Doctor

RANDOM_SEED = 42

FIRST_NAMES = [
    "Srikanth", "Anita", "Rahul", "Priya", "Vikram", "Lakshmi",
    "Arjun", "Meera", "Suresh", "Kavya", "Ravi", "Divya",
]
LAST_NAMES = [
    "Kakumanu", "Sharma", "Reddy", "Iyer", "Patel", "Nair",
    "Rao", "Gupta", "Menon", "Das",
]
CITIES = [
    ("Tenali", "522201"),
    ("Guntur", "522002"),
    ("Vijayawada", "520010"),
    ("Hyderabad", "500032"),
    ("Chennai", "600028"),
    ("Bengaluru", "560034"),
]
STREETS = [
    "Lakshmi Prasad Arcade", "MG Road", "Station Road", "Gandhi Nagar",
    "Brodipet 4th Line", "Temple Street",
]


def seed_doctors(count: int = 25, flush: bool = False) -> dict:
    """
    Seeds ``count`` doctors with reproducible data.

    With flush=True every existing doctor is deleted first.
    """
    rng = random.Random(RANDOM_SEED)

    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            deleted, _ = Doctor.objects.all().delete()
            stats["doctors_deleted"] = deleted

        doctors = []
        for _ in range(count):
            city, pincode = rng.choice(CITIES)
            doctors.append(
                Doctor(
                    first_name=rng.choice(FIRST_NAMES),
                    last_name=rng.choice(LAST_NAMES),
                    address=f"{rng.randint(1, 250)}, {rng.choice(STREETS)}",
                    city=city,
                    pincode=pincode,
                )
            )
        Doctor.objects.bulk_create(doctors)
        stats["doctors_created"] = len(doctors)

    return stats
