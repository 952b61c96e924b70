import random
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.models import Role, UserRole
from events.models import Event

TITLES = [
    "Python Web Meetup",
    "Intro to Watercolour Workshop",
    "Founders Breakfast",
    "Cloud Costs Clinic",
    "Community Garden Day",
    "Product Design Critique",
    "Evening Networking Mixer",
    "Open Source Sprint",
    "Public Speaking Lab",
    "Board Game Social",
]

VENUES = [
    "Main Hall",
    "Library Annex",
    "Innovation Hub, Room 2",
    "Riverside Pavilion",
    "Online",
]

DESCRIPTIONS = [
    "Talks from local practitioners followed by open Q&A.",
    "Bring a laptop; all materials are provided on the day.",
    "Meet people working on similar problems over coffee.",
    "",
]

CAPACITIES = [None, 2, 10, 25, 50, 100]

DEMO_PASSWORD = "Passw0rd1!"
DEMO_ACCOUNTS = (
    ("organiser@example.com", "Olivia Organiser", Role.ORGANISER),
    ("attendee@example.com", "Adam Attendee", Role.ATTENDEE),
)


def ensure_demo_accounts():
    """Create the demo organiser/attendee if missing; return the new emails."""
    User = get_user_model()
    created = []
    for email, full_name, role in DEMO_ACCOUNTS:
        user, was_created = User.objects.get_or_create(
            username=email, defaults={"email": email, "first_name": full_name}
        )
        if was_created:
            user.set_password(DEMO_PASSWORD)
            user.save()
            created.append(email)
        UserRole.objects.get_or_create(user=user, defaults={"role": role})
    return created


class Command(BaseCommand):
    help = "Seed demo accounts and upcoming events."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=12, help="Number of events.")
        parser.add_argument(
            "--start-days",
            type=int,
            default=2,
            help="Start generating events N days from today.",
        )
        parser.add_argument(
            "--span-days",
            type=int,
            default=60,
            help="Distribute events across this many days.",
        )

    @transaction.atomic
    def handle(self, *args, **opts):
        count = opts["count"]
        start_days = opts["start_days"]
        span_days = max(1, opts["span_days"])

        created_users = ensure_demo_accounts()
        if created_users:
            self.stdout.write(self.style.SUCCESS(f"Created demo users: {', '.join(created_users)}"))
        else:
            self.stdout.write("Demo users already exist.")

        organiser = get_user_model().objects.get(username=DEMO_ACCOUNTS[0][0])
        today = timezone.localtime().replace(minute=0, second=0, microsecond=0)

        events = []
        for i in range(count):
            start = today + timedelta(days=start_days + random.randint(0, span_days))
            start = start.replace(hour=random.choice([9, 13, 18]))
            events.append(
                Event(
                    organiser=organiser,
                    title=TITLES[i % len(TITLES)],
                    description=random.choice(DESCRIPTIONS),
                    start_date=start,
                    end_date=start + timedelta(hours=random.choice([2, 3, 4])),
                    location=random.choice(VENUES),
                    max_attendees=random.choice(CAPACITIES),
                )
            )
        Event.objects.bulk_create(events)

        self.stdout.write(self.style.SUCCESS(f"Created {len(events)} events."))
