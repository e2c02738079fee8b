from __future__ import annotations

import itertools

import pytest

from leafsync.contracts.sync import LinkCommand, SyncGroup
from leafsync.linking import LinkCommandGenerator, SyncGroupResolver
from tests.fakes.panels import make_panels


def _pairs(commands: list[LinkCommand]) -> list[tuple[str, str]]:
    return [(command.source_id, command.target_id) for command in commands]


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5])
def test_group_of_k_yields_k_times_k_minus_one_commands(size: int) -> None:
    generator = LinkCommandGenerator(make_panels(size))

    commands = generator.generate([SyncGroup(indices=tuple(range(size)))], sync_cursor=False, no_initial_sync=True)

    assert len(commands) == size * (size - 1)
    assert all(command.source_id != command.target_id for command in commands)
    expected = {(f"m{a}", f"m{b}") for a, b in itertools.permutations(range(size), 2)}
    assert set(_pairs(commands)) == expected


def test_commands_carry_flags(four_panels) -> None:
    commands = LinkCommandGenerator(four_panels).generate(
        [SyncGroup(indices=(0, 1))], sync_cursor=True, no_initial_sync=False
    )

    assert commands == [
        LinkCommand(source_id="m0", target_id="m1", sync_cursor=True, no_initial_sync=False),
        LinkCommand(source_id="m1", target_id="m0", sync_cursor=True, no_initial_sync=False),
    ]


def test_two_disjoint_pairs_link_only_within_each_pair(four_panels) -> None:
    groups = SyncGroupResolver().resolve([[0, 1], [2, 3]], 4)

    commands = LinkCommandGenerator(four_panels).generate(groups, sync_cursor=True, no_initial_sync=True)

    assert _pairs(commands) == [("m0", "m1"), ("m1", "m0"), ("m2", "m3"), ("m3", "m2")]
    assert all(command.sync_cursor and command.no_initial_sync for command in commands)


def test_group_of_three_skips_unlisted_panel(four_panels) -> None:
    groups = SyncGroupResolver().resolve([[0, 1, 3]], 4)

    commands = LinkCommandGenerator(four_panels).generate(groups, sync_cursor=False, no_initial_sync=True)

    assert len(commands) == 6
    assert set(_pairs(commands)) == {(f"m{a}", f"m{b}") for a, b in itertools.permutations([0, 1, 3], 2)}
    assert not any("m2" in pair for pair in _pairs(commands))


def test_overlapping_groups_produce_the_union_of_their_commands(four_panels) -> None:
    generator = LinkCommandGenerator(four_panels)
    first = generator.generate([SyncGroup(indices=(0, 1))], sync_cursor=False, no_initial_sync=True)
    second = generator.generate([SyncGroup(indices=(0, 2))], sync_cursor=False, no_initial_sync=True)

    both = generator.generate(
        [SyncGroup(indices=(0, 1)), SyncGroup(indices=(0, 2))], sync_cursor=False, no_initial_sync=True
    )

    assert both == first + second
    assert ("m0", "m1") in _pairs(both)
    assert ("m0", "m2") in _pairs(both)
    assert ("m1", "m2") not in _pairs(both)


def test_repeated_groups_are_not_deduplicated(four_panels) -> None:
    group = SyncGroup(indices=(0, 1))

    commands = LinkCommandGenerator(four_panels).generate([group, group], sync_cursor=False, no_initial_sync=True)

    assert _pairs(commands) == [("m0", "m1"), ("m1", "m0"), ("m0", "m1"), ("m1", "m0")]


def test_duplicate_indices_never_produce_self_links(four_panels) -> None:
    commands = LinkCommandGenerator(four_panels).generate(
        [SyncGroup(indices=(0, 0, 1))], sync_cursor=False, no_initial_sync=True
    )

    assert all(command.source_id != command.target_id for command in commands)
    assert set(_pairs(commands)) == {("m0", "m1"), ("m1", "m0")}


def test_single_panel_all_group_has_no_commands() -> None:
    groups = SyncGroupResolver().resolve("all", 1)

    assert groups == [SyncGroup(indices=(0,))]
    assert LinkCommandGenerator(make_panels(1)).generate(groups, sync_cursor=True, no_initial_sync=True) == []


def test_link_command_payload_uses_host_field_names() -> None:
    command = LinkCommand(source_id="a", target_id="b", sync_cursor=True, no_initial_sync=False)

    assert command.to_payload() == {"source": "a", "target": "b", "syncCursor": True, "noInitialSync": False}


def test_panels_sharing_an_id_are_never_linked_to_themselves() -> None:
    panels = make_panels(3)
    panels[2] = panels[2].model_copy(update={"id": "m0"})

    commands = LinkCommandGenerator(panels).generate(
        [SyncGroup(indices=(0, 1, 2))], sync_cursor=False, no_initial_sync=True
    )

    assert all(command.source_id != command.target_id for command in commands)
    assert _pairs(commands) == [("m0", "m1"), ("m1", "m0"), ("m1", "m0"), ("m0", "m1")]
