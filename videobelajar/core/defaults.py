"""Built-in data shared by the API and the client: the default catalog and the demo accounts."""

from dataclasses import dataclass
from typing import Any

DEFAULT_COURSES: tuple[dict[str, Any], ...] = (
    {
        "title": "Big 4 Auditor Financial Analyst",
        "description": "Mulai transformasi dengan instruktur profesional, harga yang terjangkau, dan sistem pembelajaran yang mudah dipahami.",
        "photos": "/images/cards/card1.png",
        "mentor": "Jenna Ortega",
        "rolementor": "Senior Accountant",
        "avatar": "/images/tutors/tutor-card1.png",
        "company": "Gojek",
        "rating": 4.5,
        "review_count": 126,
        "price": "300K",
        "category": "Bisnis",
    },
    {
        "title": "Digital Marketing Strategy",
        "description": "Pelajari strategi pemasaran digital yang efektif untuk meningkatkan brand awareness dan konversi.",
        "photos": "/images/cards/card2.png",
        "mentor": "Sarah Johnson",
        "rolementor": "Marketing Director",
        "avatar": "/images/tutors/tutor-card2.png",
        "company": "Tokopedia",
        "rating": 4.2,
        "review_count": 98,
        "price": "250K",
        "category": "Pemasaran",
    },
    {
        "title": "UI/UX Design Fundamentals",
        "description": "Kuasai dasar-dasar desain UI/UX untuk menciptakan pengalaman pengguna yang luar biasa.",
        "photos": "/images/cards/card3.png",
        "mentor": "Michael Chen",
        "rolementor": "Lead Designer",
        "avatar": "/images/tutors/tutor-card3.png",
        "company": "Grab",
        "rating": 4.7,
        "review_count": 204,
        "price": "400K",
        "category": "Desain",
    },
)


@dataclass(frozen=True)
class HardcodedAccount:
    id: str
    name: str
    email: str
    password: str
    role: str


# Demo accounts that bypass the database and hashing entirely.
HARDCODED_ACCOUNTS: tuple[HardcodedAccount, ...] = (
    HardcodedAccount("admin", "Administrator", "admin@videobelajar.com", "admin123", "admin"),
    HardcodedAccount("demo", "Demo User", "user@example.com", "123456", "user"),
)


def match_hardcoded_account(email: str, password: str) -> HardcodedAccount | None:
    for account in HARDCODED_ACCOUNTS:
        if account.email == email and account.password == password:
            return account
    return None
