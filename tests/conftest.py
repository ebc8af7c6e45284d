import pytest

from groupmixer.models import Gender, Person, Profile


@pytest.fixture
def people():
    return [
        Person(1, "John Doe", Gender.MALE, 3, True, 2, Profile.COMFORTABLE, 25),
        Person(2, "Jane Smith", Gender.FEMALE, 4, False, 3, Profile.RESERVED, 30),
        Person(3, "Alex Johnson", Gender.NOT_SPECIFIED, 2, True, 4, Profile.SHY, 22),
        Person(4, "Maria Garcia", Gender.FEMALE, 1, False, 1, Profile.COMFORTABLE, 28),
        Person(5, "Pierre Dubois", Gender.MALE, 4, True, 3, Profile.RESERVED, 35),
        Person(6, "Sophie Martin", Gender.FEMALE, 3, False, 2, Profile.SHY, 26),
    ]
