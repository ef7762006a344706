"""Profile default fields - the answers used when no learned answer exists"""

from linkedin_auto_apply.data.store import KEY_DEFAULT_FIELDS

# Keys of the profile default-field map, matched against question labels
DEFAULT_FIELD_KEYS = (
    "YearsOfExperience",
    "City",
    "FirstName",
    "LastName",
    "Email",
    "PhoneNumber",
)


def load_default_fields(store):
    """Return the profile default fields, or None if the profile was never saved"""
    stored = store.get(KEY_DEFAULT_FIELDS)
    if not isinstance(stored, dict):
        return None
    fields = {key: "" for key in DEFAULT_FIELD_KEYS}
    fields.update({key: str(value) for key, value in stored.items() if value is not None})
    return fields
