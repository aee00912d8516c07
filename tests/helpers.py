from dataclasses import dataclass
from datetime import datetime

from jsonview.core.serializer import Serializer


@dataclass
class Person:
    name: str
    age: int
    updated_at: datetime | None = None


class PersonSerializer(Serializer):
    def attributes(self):
        return {"name": self.object.name, "age": self.object.age}

    def last_modified(self):
        return self.object.updated_at

    def cache_key(self):
        if self.object.updated_at is None:
            return None
        return "%s|%s" % (self.object.name, int(self.object.updated_at.timestamp()))


class VendorPersonSerializer(PersonSerializer):
    MIME_TYPE = "application/vnd.people+json"


class GreetingSerializer(Serializer):
    def __init__(self, obj, greeting, *, punctuation="!", encoder=None):
        super().__init__(obj, encoder=encoder)
        self.greeting = greeting
        self.punctuation = punctuation

    def attributes(self):
        return {"message": f"{self.greeting}, {self.object.name}{self.punctuation}"}


class IncompleteSerializer(Serializer):
    pass
