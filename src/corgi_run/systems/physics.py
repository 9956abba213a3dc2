"""
physics.py
----------
Vertical motion of the player: gravity, integration and ground clamp.

Responsibilities
----------------
- Integrate velocity under constant gravity, then position.
- Snap to the ground line and zero velocity when sinking below it.
- Refill jump charges only on the airborne -> grounded transition.
"""

from corgi_run.core.runtime.game_settings import Physics


def update_player(player, dt, gravity=Physics.GRAVITY):
    """
    Advance the player's vertical motion by one tick.

    Args:
        player (Player): The player instance being updated.
        dt (float): Elapsed seconds since the previous tick.

    Returns:
        bool: True on the tick the player lands.
    """
    player.vy += gravity * dt
    player.y += player.vy * dt

    ground = player.ground_y
    if player.y >= ground:
        player.y = ground
        player.vy = 0.0
        if not player.on_ground:
            player.on_ground = True
            player.jumps_left = player.max_jumps
            return True
    else:
        player.on_ground = False

    return False
