from collections.abc import Iterable

from annotify.members import Member


def member_names(members: Iterable[Member]) -> list[str]:
    return [member.name for member in members]
