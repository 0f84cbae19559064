"""Member service: idempotent add, removal and role changes."""

from taskboard_api.app.schemas.board import BoardCreate
from taskboard_api.app.schemas.member import MemberRole, MembershipCreate


def test_add_member_defaults_to_editor(boards, members, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    member = members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))
    assert member.role == MemberRole.EDITOR


def test_adding_twice_keeps_first_role(boards, members, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))

    first = members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id, role=MemberRole.VIEWER))
    second = members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id, role=MemberRole.ADMIN))

    assert second == first
    assert second.role == MemberRole.VIEWER
    bob_rows = [m for m in queries.list_members(board.id) if m.account_id == bob.id]
    assert len(bob_rows) == 1


def test_readding_creator_does_not_downgrade_admin(boards, members, alice):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    member = members.add_member(MembershipCreate(board_id=board.id, account_id=alice.id, role=MemberRole.VIEWER))
    assert member.role == MemberRole.ADMIN


def test_remove_member(boards, members, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))

    assert members.remove_member(board.id, bob.id) is True
    assert queries.get_membership(board.id, bob.id) is None
    assert members.remove_member(board.id, bob.id) is False


def test_set_member_role(boards, members, queries, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    original = members.add_member(MembershipCreate(board_id=board.id, account_id=bob.id))

    updated = members.set_member_role(board.id, bob.id, MemberRole.ADMIN)

    assert updated.id == original.id
    assert updated.role == MemberRole.ADMIN
    assert queries.get_membership(board.id, bob.id).role == MemberRole.ADMIN


def test_set_role_of_non_member_returns_none(boards, members, alice, bob):
    board = boards.create_board(BoardCreate(title="B", created_by=alice.id))
    assert members.set_member_role(board.id, bob.id, MemberRole.VIEWER) is None
