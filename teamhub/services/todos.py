# teamhub/services/todos.py
"""
Personal todo items.

Every lookup filters on both the todo id and its creator, so another
user's todo is indistinguishable from a missing one.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from teamhub.core.exceptions import NotFoundError
from teamhub.core.logging import logger
from teamhub.models.todo import Todo
from teamhub.models.user import User


def _get_owned_todo(db: Session, current_user: User, todo_id: int) -> Todo:
    todo = (
        db.query(Todo)
        .filter(Todo.id == todo_id, Todo.created_by == current_user.id)
        .first()
    )
    if not todo:
        raise NotFoundError("Todo not found")
    return todo


def create_todo(db: Session, current_user: User, title: str, description: str) -> Todo:
    todo = Todo(title=title, description=description, created_by=current_user.id)
    db.add(todo)
    db.commit()
    db.refresh(todo)
    logger.info("Todo created", todo_id=todo.id, user_id=current_user.id)
    return todo


def list_todos(db: Session, current_user: User) -> List[Todo]:
    return (
        db.query(Todo)
        .filter(Todo.created_by == current_user.id)
        .order_by(Todo.id)
        .all()
    )


def get_todo(db: Session, current_user: User, todo_id: int) -> Todo:
    return _get_owned_todo(db, current_user, todo_id)


def update_todo(
    db: Session,
    current_user: User,
    todo_id: int,
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> Todo:
    todo = _get_owned_todo(db, current_user, todo_id)

    if title:
        todo.title = title
    if description:
        todo.description = description

    db.commit()
    db.refresh(todo)
    return todo


def delete_todo(db: Session, current_user: User, todo_id: int) -> None:
    deleted = (
        db.query(Todo)
        .filter(Todo.id == todo_id, Todo.created_by == current_user.id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise NotFoundError("Todo not found")
    db.commit()
    logger.info("Todo deleted", todo_id=todo_id, user_id=current_user.id)
