"""Seed guests for the in-memory repository."""

from datetime import datetime
from typing import List

from guestbook.models.guest import Guest


def seed_guests() -> List[Guest]:
    """Return a fresh copy of the demo guest set."""
    return [
        Guest(
            id="1",
            name="Lia Thomas",
            email="lia.thomas51@reddit.com",
            phone="+1 212-456-7890",
            loyalty_number="RF",
            avatar_url="https://i.pravatar.cc/150?text=Lia+Thomas",
            customer_since=datetime(2023, 6, 15),
            birthday=datetime(1990, 4, 12),
        ),
        Guest(
            id="2",
            name="Bergnaum",
            email="cleorahills@gmail.com",
            phone="+1 212-450-7890",
            loyalty_number="BG",
            customer_since=datetime(2023, 3, 20),
            birthday=datetime(1985, 8, 25),
            average_spend=85.50,
            lifetime_spend=342.00,
            total_orders=4,
            average_tip=15.25,
            loyalty_earned=34,
            loyalty_available=34.0,
            loyalty_amount=34,
            total_visits=4,
            upcoming_visits=1,
            allergies=["Shellfish"],
            notes={
                "general": "Prefers window seating",
                "seatingPreferences": "Window table, quiet area",
            },
            tags=["Regular", "Allergies"],
            last_visit=datetime(2024, 11, 10),
        ),
        Guest(
            id="3",
            name="Wunderlich",
            email="wunder@gmail.com",
            phone="+1 212-236-7890",
            loyalty_number="WL",
            customer_since=datetime(2023, 1, 10),
            birthday=datetime(1978, 12, 3),
            average_spend=125.75,
            lifetime_spend=1257.50,
            total_orders=10,
            average_tip=22.50,
            loyalty_earned=125,
            loyalty_redeemed=25,
            loyalty_available=100.0,
            loyalty_amount=100,
            total_visits=10,
            cancelled_visits=1,
            notes={
                "general": "Enjoys wine pairings",
                "specialRelation": "Anniversary regular - married here",
            },
            tags=["VIP", "Wine Lover"],
            last_visit=datetime(2024, 11, 5),
        ),
        Guest(
            id="4",
            name="Arjun Gerhold",
            email="ajashan@user.com",
            phone="+1 122-456-7890",
            loyalty_number="AG",
            customer_since=datetime(2023, 8, 5),
            birthday=datetime(1992, 2, 18),
            average_spend=67.25,
            lifetime_spend=403.50,
            total_orders=6,
            average_tip=12.80,
            loyalty_earned=40,
            loyalty_redeemed=10,
            loyalty_available=30.0,
            loyalty_amount=30,
            total_visits=6,
            upcoming_visits=2,
            no_shows=1,
            allergies=["Nuts", "Dairy"],
            notes={
                "general": "Tech industry professional",
                "allergies": "Severe nut allergy - EpiPen required",
                "seatingPreferences": "Booth preferred for privacy",
            },
            tags=["Allergies", "Business"],
            last_visit=datetime(2024, 10, 28),
        ),
        Guest(
            id="5",
            name="Simeon Wilderman",
            email="simeon@user.com",
            phone="+1 287-456-7890",
            loyalty_number="SW",
            customer_since=datetime(2023, 9, 12),
            birthday=datetime(1988, 7, 9),
            average_spend=95.00,
            lifetime_spend=475.00,
            total_orders=5,
            average_tip=18.00,
            loyalty_earned=47,
            loyalty_available=47.0,
            loyalty_amount=47,
            total_visits=5,
            upcoming_visits=1,
            notes={
                "general": "Photographer - often brings clients",
                "specialNote": "Prefers dim lighting for ambiance",
            },
            tags=["Creative", "Business Client"],
            last_visit=datetime(2024, 11, 1),
        ),
        Guest(
            id="6",
            name="Eden Kautzer",
            email="edenka@user.com",
            phone="+1 212-456-7090",
            loyalty_number="EK",
            customer_since=datetime(2023, 4, 22),
            birthday=datetime(1995, 11, 30),
            average_spend=52.75,
            lifetime_spend=316.50,
            total_orders=6,
            average_tip=10.50,
            loyalty_earned=31,
            loyalty_redeemed=5,
            loyalty_available=26.0,
            loyalty_amount=26,
            total_visits=6,
            cancelled_visits=2,
            no_shows=1,
            allergies=["Gluten"],
            notes={
                "general": "Student - budget conscious",
                "allergies": "Celiac disease - strict gluten-free required",
                "seatingPreferences": "Casual seating area",
            },
            tags=["Student", "Gluten-Free", "Budget"],
            last_visit=datetime(2024, 10, 15),
        ),
        Guest(
            id="7",
            name="Gino Yost",
            email="gyost@test.com",
            phone="+1 222-456-7890",
            loyalty_number="GY",
            customer_since=datetime(2023, 2, 8),
            birthday=datetime(1980, 5, 14),
            average_spend=145.25,
            lifetime_spend=1742.00,
            total_orders=12,
            average_tip=28.75,
            loyalty_earned=174,
            loyalty_redeemed=50,
            loyalty_available=124.0,
            loyalty_amount=124,
            total_visits=12,
            upcoming_visits=1,
            notes={
                "general": "Food blogger and critic",
                "specialRelation": "Influential food reviewer",
                "specialNote": "VIP treatment - comp desserts occasionally",
            },
            tags=["VIP", "Food Critic", "Influencer"],
            last_visit=datetime(2024, 11, 8),
        ),
        Guest(
            id="8",
            name="Ayden Veum",
            email="ayden.veum@red.com",
            phone="+1 212-456-7890",
            loyalty_number="AV",
            customer_since=datetime(2023, 7, 30),
            birthday=datetime(1987, 3, 21),
            average_spend=78.90,
            lifetime_spend=473.40,
            total_orders=6,
            average_tip=14.25,
            loyalty_earned=47,
            loyalty_redeemed=15,
            loyalty_available=32.0,
            loyalty_amount=32,
            total_visits=6,
            cancelled_visits=1,
            allergies=["Seafood"],
            notes={
                "general": "Works in marketing",
                "allergies": "Mild seafood allergy - avoid shellfish",
            },
            tags=["Marketing", "Allergies"],
            last_visit=datetime(2024, 10, 20),
        ),
        Guest(
            id="9",
            name="Maria Rodriguez",
            email="maria.r@email.com",
            phone="+1 555-123-4567",
            loyalty_number="MR",
            customer_since=datetime(2023, 5, 15),
            birthday=datetime(1989, 9, 8),
            average_spend=92.50,
            lifetime_spend=555.00,
            total_orders=6,
            average_tip=17.50,
            loyalty_earned=55,
            loyalty_redeemed=20,
            loyalty_available=35.0,
            loyalty_amount=35,
            total_visits=6,
            upcoming_visits=1,
            notes={
                "general": "Celebrates here monthly with family",
                "seatingPreferences": "Large table for family gatherings",
            },
            tags=["Family", "Regular"],
            last_visit=datetime(2024, 11, 3),
        ),
        Guest(
            id="10",
            name="James Chen",
            email="j.chen@business.com",
            phone="+1 555-987-6543",
            loyalty_number="JC",
            customer_since=datetime(2023, 1, 5),
            birthday=datetime(1983, 6, 12),
            average_spend=210.00,
            lifetime_spend=2520.00,
            total_orders=12,
            average_tip=42.00,
            loyalty_earned=252,
            loyalty_redeemed=100,
            loyalty_available=152.0,
            loyalty_amount=152,
            total_visits=12,
            upcoming_visits=1,
            notes={
                "general": "Executive - frequent business dinners",
                "specialRelation": "Corporate account holder",
                "seatingPreferences": "Private dining room for meetings",
            },
            tags=["VIP", "Business", "Corporate"],
            last_visit=datetime(2024, 11, 12),
        ),
    ]
