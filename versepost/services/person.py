from __future__ import annotations

from versepost.models.person import PersonCreate, PersonUpdate


class PersonService:
    """Person actions without a backing store; each returns a description."""

    def create(self, person: PersonCreate) -> str:
        return "This action adds a new person"

    def find_all(self) -> str:
        return "This action returns all person"

    def find_one(self, id: int) -> str:
        return f"This action returns a #{id} person"

    def update(self, id: int, person: PersonUpdate) -> str:
        return f"This action updates a #{id} person"

    def remove(self, id: int) -> str:
        return f"This action removes a #{id} person"
