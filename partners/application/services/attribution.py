"""
Audit attribution for synchronized records.
"""
from typing import Optional

# Identity of the platform itself, used when nobody else can be named.
SYSTEM_ACTOR = "IDA"


def resolve_actor(
    actor: Optional[str],
    publisher: Optional[str],
    system_actor: str = SYSTEM_ACTOR,
) -> str:
    """
    Decide who a record write is attributed to.

    Args:
        actor: Authenticated caller, if any
        publisher: Publisher declared on the event, if any
        system_actor: Fallback identity

    Returns:
        The caller, else the publisher, else the system identity
    """
    if actor:
        return actor
    if publisher:
        return publisher
    return system_actor
