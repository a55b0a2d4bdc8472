# sc2bot

Building blocks for writing StarCraft II bots in Python.

## Modules

- `sc2bot.enums` – `parse_enum(enum_cls, text, use_primitives=False)` returns
  the member named exactly by `text`; with `use_primitives` a decimal integer
  naming a member's value is accepted too. Anything else raises
  `ParseEnumError` (a `ValueError`). The `variant_checkers` class decorator
  adds an `is_<snake_case_name>()` method for every member; `checker_name`
  gives that method name (`"CantBuildOnThat"` → `"is_cant_build_on_that"`).
- `sc2bot.api` – `API`, a request/response channel over a connection that
  has `send_binary`, `recv` and `close`. Requests are bytes or objects with
  `SerializeToString()`; replies go through `response_factory` (default
  `bytes`). Methods: `send`, `send_request` (wait for the reply and discard
  it), `send_only` with a later `wait_response`, and `close`. Exchanges are
  serialised by a lock, and `API` works as a context manager.
- `sc2bot.client` – starting the game client and connecting to it:
  `sc2_binary` (executable path per OS, architecture and Wine),
  `launch_command` (command line and working directory), `launch_client`
  (starts the process; set `SC2_WINE=1` to run through Wine, with the
  `WINE` variable naming the Wine binary), `connect_to_websocket` (retries
  until `ws://host:port/sc2api` accepts), `get_unused_port` /
  `get_unused_ports` (lowest free local ports from 5000 up), `Ports` and
  `ladder_ports` (the port layout derived from a ladder start port),
  `LaunchOptions`, and `replay_path` / `save_replay`.
- `sc2bot.counting` – `Cost`, `Resources` (`can_afford`,
  `can_afford_upgrade`, `subtract`, `subtract_upgrade`; values never drop
  below zero), `corrected_unit_cost` (morphs cost only the difference to
  their predecessor, zerg structures exclude the drone, zerglings come in
  pairs), and `CountOptions` with `Completion` and `UnitAlias` for counting
  complete, ordered or all units, optionally with unit or tech aliases.
- `sc2bot.grid` – `z_height_from_raw`, `is_surround_visible`,
  `has_creep_around`, `neighbors8`, `placement_rings` with
  `PlacementOptions` (the candidate positions of a building-placement
  search, ring by ring), `classify_terrain` (vision blockers and ramp cells)
  and `cluster_points` (connected groups of points).
- `sc2bot.expansions` – `Alliance`, `Resource` and `Expansion`;
  `expansion_offsets`, `resources_center`, `find_expansion_location`,
  `sort_minerals` and `build_expansion` for placing a townhall next to a
  resource group; `get_expansion`, `free_expansions`, `owned_expansions`
  and `enemy_expansions` for picking among expansions.

## Examples

Counting units, including those still being built:

```python
from sc2bot.counting import CountOptions

counter = CountOptions(
    current={"CommandCenter": 1, "OrbitalCommand": 1},
    ordered={"CommandCenter": 1},
    tech_alias={"CommandCenter": ["OrbitalCommand", "PlanetaryFortress"]},
)
counter.all().tech().count("CommandCenter")   # 3
```

Finding a townhall spot for a group of resources:

```python
from sc2bot.expansions import Resource, build_expansion

group = [Resource(1, (40.5, 40.5)), Resource(2, (41.5, 44.5)), Resource(3, (36.5, 48.5), is_geyser=True)]
expansion = build_expansion(group, is_placeable=lambda cell: True)
expansion.loc, expansion.minerals
```

Saving a replay; the `.SC2Replay` extension is added when missing:

```python
from sc2bot.client import replay_path, save_replay

replay_path("games/last")      # Path("games/last.SC2Replay")
save_replay(replay_bytes, "games/last")
```

## What the package does not do

The package has no bot runner and no game loop: it does not create or join
games, step the game, or call a bot's start, step and end hooks. It has no
types for unit commands, chat or camera actions, and no list of action
results, so building and decoding the game's request and response messages
is left to the caller, who passes them to `API`. There is no command-line
program.

## Requirements

Python 3.10 or later and `websocket-client`. Launching games needs a local
installation of the game client.