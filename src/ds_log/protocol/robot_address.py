"""Robot address candidates for the 2016 control system."""
from __future__ import annotations

from typing import List

LOOPBACK_ADDRESS = '127.0.0.1'


def static_ip(team: int, host: int, net: int = 10) -> str:
    """``net.TE.AM.host`` for a team number, e.g. team 3794 -> ``10.37.94.<host>``."""
    _validate_team(team)
    return f'{net}.{team // 100}.{team % 100}.{host}'


def default_robot_addresses(team: int) -> List[str]:
    """Candidate robot addresses, most specific first, loopback last."""
    _validate_team(team)
    return [
        f'roboRIO-{team}-FRC.local',
        f'roboRIO-{team}-FRC._ni._tcp.local',
        static_ip(team, 2, net=172),
        static_ip(team, 2),
        LOOPBACK_ADDRESS,
    ]


def _validate_team(team: int) -> None:
    if isinstance(team, bool) or not isinstance(team, int):
        raise ValueError(f'team number must be an integer, got {team!r}')
    if team < 0 or team // 100 > 255:
        raise ValueError(f'team number out of range: {team}')
