"""End-to-end board lifecycle through the services, from account to cascade."""

from taskboard_api.app.schemas.account import AccountCreate
from taskboard_api.app.schemas.board import BoardCreate
from taskboard_api.app.schemas.member import MemberRole
from taskboard_api.app.schemas.todo import TodoCreate, TodoStatus, TodoUpdate


def test_launch_plan_lifecycle(accounts, boards, todos, queries):
    alice = accounts.create_account(
        AccountCreate(username="alice", phone_number="+15550001", password_hash="h")
    )
    board = boards.create_board(BoardCreate(title="Launch Plan", created_by=alice.id))

    (membership,) = queries.list_members(board.id)
    assert (membership.board_id, membership.account_id, membership.role) == (board.id, alice.id, MemberRole.ADMIN)
    assert queries.list_todos(board.id) == []

    todo = todos.create_todo(TodoCreate(board_id=board.id, title="Write spec", created_by=alice.id))
    (listed,) = queries.list_todos(board.id)
    assert listed.assignee is None
    assert listed.status == TodoStatus.TODO

    done = todos.update_todo(todo.id, TodoUpdate(status=TodoStatus.COMPLETED))
    assert done.updated_at > todo.created_at
    assert done.status == TodoStatus.COMPLETED

    assert boards.delete_board(board.id) is True
    assert queries.list_todos(board.id) == []
    assert queries.get_membership(board.id, alice.id) is None
