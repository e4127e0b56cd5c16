# Loyalty discount for cats with a history of completed procedures
DISCOUNT_THRESHOLD = 3
DISCOUNT_PERCENT = 10


def procedure_discount(completed_count):
    """Percent discount for a cat with ``completed_count`` completed procedures."""
    if completed_count >= DISCOUNT_THRESHOLD:
        return DISCOUNT_PERCENT
    return 0
