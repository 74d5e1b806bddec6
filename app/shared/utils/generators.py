"""Document ID generation.

New Firestore documents (universities, applications, registrations,
subscriptions) get a CUID2 chosen client-side, so the ID is known before
the write and can be echoed in the response.
"""

from cuid2 import cuid_wrapper

_next_id = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant document ID."""
    return str(_next_id())
