"""Load testing with Locust for the contacts service."""

import random
from locust import HttpUser, task, between

KNOWN_EMAILS = [
    "john.doe@example.com",
    "sarah.smith@example.com",
    "mike.johnson@example.com",
    "emily.brown@example.com",
    "david.wilson@example.com",
]


class ContactsUser(HttpUser):
    """Load test user for the contacts service."""

    wait_time = between(1, 3)
    host = "http://localhost:3000"

    def on_start(self):
        """Setup for each user."""
        response = self.client.get("/health")
        if response.status_code != 200:
            raise Exception("Contacts service not available")

    @task(10)
    def lookup_known_contact(self):
        """Look up a seeded contact with random casing."""
        email = random.choice(KNOWN_EMAILS)
        if random.random() < 0.5:
            email = email.upper()

        with self.client.get(
            "/api/contacts/by-email",
            params={"email": email},
            name="/api/contacts/by-email [found]",
            catch_response=True
        ) as response:
            if response.status_code == 200 and response.json()["email"].lower() == email.lower():
                response.success()
            else:
                response.failure(f"HTTP {response.status_code}")

    @task(3)
    def lookup_unknown_contact(self):
        """Look up an email that is not stored."""
        with self.client.get(
            "/api/contacts/by-email",
            params={"email": f"user{random.randint(1, 10000)}@example.org"},
            name="/api/contacts/by-email [not found]",
            catch_response=True
        ) as response:
            if response.status_code == 404:
                response.success()
            else:
                response.failure(f"Expected 404, got HTTP {response.status_code}")

    @task(1)
    def lookup_invalid_email(self):
        """Send a malformed email."""
        with self.client.get(
            "/api/contacts/by-email",
            params={"email": "not-an-email"},
            name="/api/contacts/by-email [invalid]",
            catch_response=True
        ) as response:
            if response.status_code == 400:
                response.success()
            else:
                response.failure(f"Expected 400, got HTTP {response.status_code}")

    @task(2)
    def list_contacts(self):
        """List all contacts."""
        with self.client.get("/api/contacts", catch_response=True) as response:
            if response.status_code == 200 and len(response.json()) > 0:
                response.success()
            else:
                response.failure(f"HTTP {response.status_code}")
