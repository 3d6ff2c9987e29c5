"""Club entry age check."""

ENTRY_AGE = 21

DENIED_MESSAGE = "You can not enter the club!"
WELCOME_MESSAGE = "Welcome!"


def can_enter(age: int) -> bool:
    """Check if the given age is old enough to enter."""
    return age >= ENTRY_AGE


def check_entry(age: int) -> str:
    """Return the door message for the given age."""
    if not can_enter(age):
        return DENIED_MESSAGE
    return WELCOME_MESSAGE
