from hobbies.models.people import Person

__all__ = ["Person"]
