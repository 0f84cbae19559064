"""Query service: board union, counts and account resolution."""

import logging

from taskboard_api.app.core.store import EntityKind
from taskboard_api.app.schemas.board import BoardCreate
from taskboard_api.app.schemas.member import MembershipCreate
from taskboard_api.app.schemas.todo import TodoCreate


def test_boards_for_account_is_union_without_duplicates(boards, members, queries, alice, bob):
    own = boards.create_board(BoardCreate(title="Own", created_by=alice.id))
    shared = boards.create_board(BoardCreate(title="Shared", created_by=bob.id))
    boards.create_board(BoardCreate(title="Bob only", created_by=bob.id))
    members.add_member(MembershipCreate(board_id=shared.id, account_id=alice.id))

    listed = queries.list_boards_for_account(alice.id)

    # "Own" is reachable both as creator and through the admin membership.
    assert sorted(b.id for b in listed) == sorted([own.id, shared.id])


def test_boards_created_without_membership_are_still_listed(boards, members, queries, alice):
    board = boards.create_board(BoardCreate(title="Own", created_by=alice.id))
    members.remove_member(board.id, alice.id)

    assert [b.id for b in queries.list_boards_for_account(alice.id)] == [board.id]


def test_board_counts(boards, members, todos, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))
    todos.create_todo(TodoCreate(board_id=board.id, title="one", created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=board.id, title="two", created_by=alice.id))
    empty = boards.create_board(BoardCreate(title="Empty", created_by=alice.id))

    counts = {b.id: (b.todo_count, b.member_count) for b in queries.list_boards_for_account(alice.id)}

    assert counts[board.id] == (2, 2)
    assert counts[empty.id] == (0, 1)


def test_list_boards_covers_every_board(boards, queries, alice, bob):
    boards.create_board(BoardCreate(title="A", created_by=alice.id))
    boards.create_board(BoardCreate(title="B", created_by=bob.id))
    assert [b.title for b in queries.list_boards()] == ["A", "B"]


def test_board_with_members_resolves_accounts(boards, members, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))

    detail = queries.get_board_with_members(board.id)

    assert detail.title == "B"
    assert [m.username for m in detail.members] == ["alice", "bob"]
    assert not hasattr(detail.members[0], "password_hash")


def test_board_with_members_missing_board(queries):
    assert queries.get_board_with_members(3) is None


def test_dangling_member_is_skipped(boards, members, queries, store, alice, bob, caplog):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))
    store.delete(EntityKind.ACCOUNT, bob.id)

    with caplog.at_level(logging.WARNING):
        detail = queries.get_board_with_members(board.id)

    assert [m.username for m in detail.members] == ["alice"]
    assert "missing account" in caplog.text


def test_list_todos_resolves_assignee(boards, todos, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=board.id, title="assigned", assigned_to=bob.id, created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=board.id, title="open", created_by=alice.id))

    listed = {t.title: t for t in queries.list_todos(board.id)}

    assert listed["assigned"].assignee.username == "bob"
    assert listed["open"].assignee is None
    assert "assignee" not in listed["open"].model_fields_set


def test_list_todos_tolerates_missing_assignee(boards, todos, queries, store, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=board.id, title="t", assigned_to=bob.id, created_by=alice.id))
    store.delete(EntityKind.ACCOUNT, bob.id)

    (todo,) = queries.list_todos(board.id)

    assert todo.assigned_to == bob.id
    assert todo.assignee is None


def test_list_todos_only_returns_board_todos(boards, todos, queries, alice):
    first = boards.create_board(BoardCreate(title="1", created_by=alice.id))
    second = boards.create_board(BoardCreate(title="2", created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=first.id, title="mine", created_by=alice.id))
    todos.create_todo(TodoCreate(board_id=second.id, title="theirs", created_by=alice.id))

    assert [t.title for t in queries.list_todos(first.id)] == ["mine"]


def test_account_lookups(queries, alice):
    assert queries.get_account(alice.id) == alice
    assert queries.get_account_by_username("alice") == alice
    assert queries.get_account_by_phone("+15550001") == alice
    assert queries.get_account_by_phone("+19999999") is None
