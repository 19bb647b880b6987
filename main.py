from replay_outcome.models import PlayerState
from replay_outcome.winners import determine_winners

players = [
    PlayerState("RED#001", "red-1", 0, 1, 30.0, team="RED"),
    PlayerState("RED#002", "red-2", 1, 1, 10.0, team="RED"),
    PlayerState("BLU#003", "blue-1", 2, 2, 5.0, team="BLUE"),
    PlayerState("BLU#004", "blue-2", 3, 0, 0.0, team="BLUE"),
]

# Red 2 stocks / 40%, Blue 2 stocks / 5% -> Blue on damage
determine_winners(players, is_teams=True)

for p in players:
    print(p)

print("\nTrying a match where nobody is left...")

determine_winners(
    [PlayerState("A#1", "a", 0, 0, 0.0), PlayerState("B#2", "b", 1, 0, 0.0)],
    is_teams=False,
)  # raises InvalidPlayerStateError
