"""
Allowlisted partial updates.

Each updatable model declares a mapping of field name -> setter. Request
payload keys outside that mapping are dropped before validation.
"""

NO_VALID_FIELDS = 'No valid fields to update'


def set_attribute(field):
    """Return a setter that assigns ``value`` to ``field`` unchanged."""
    def setter(instance, value):
        setattr(instance, field, value)
    return setter


def build_setters(fields, **overrides):
    """
    Build a field -> setter mapping.

    Args:
        fields: Field names assigned as-is
        **overrides: Custom setters for fields that need normalisation
    """
    setters = {field: set_attribute(field) for field in fields}
    setters.update(overrides)
    return setters


def select_updates(data, setters):
    """Keep only the keys of ``data`` that have a setter."""
    return {key: value for key, value in data.items() if key in setters}


def apply_updates(instance, updates, setters):
    """
    Apply allowlisted updates to a model instance and save it.

    Raises:
        ValueError: If no allowlisted field is present in ``updates``
    """
    updates = select_updates(updates, setters)
    if not updates:
        raise ValueError(NO_VALID_FIELDS)

    for field, value in updates.items():
        setters[field](instance, value)

    instance.save()
    return instance
