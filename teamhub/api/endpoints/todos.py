# teamhub/api/endpoints/todos.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from teamhub.db.session import get_db
from teamhub.middleware.auth import get_current_user
from teamhub.models.user import User
from teamhub.schemas.base import ApiResponse
from teamhub.schemas.todo import Todo as TodoSchema, TodoCreate, TodoUpdate
from teamhub.services import todos as todo_service

router = APIRouter()


@router.post("", response_model=ApiResponse[TodoSchema], status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_in: TodoCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    todo = todo_service.create_todo(db, current_user, todo_in.title, todo_in.description)
    return ApiResponse(
        statusCode=status.HTTP_201_CREATED,
        data=TodoSchema.model_validate(todo),
        message="Todo Created Successfully",
    )


@router.get("", response_model=ApiResponse[List[TodoSchema]])
def get_todos(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List the current user's todos
    """
    todos = todo_service.list_todos(db, current_user)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=[TodoSchema.model_validate(todo) for todo in todos],
        message="Todos Retrieved Successfully",
    )


@router.get("/{todo_id}", response_model=ApiResponse[TodoSchema])
def get_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    todo = todo_service.get_todo(db, current_user, todo_id)
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=TodoSchema.model_validate(todo),
        message="Todo Retrieved Successfully",
    )


@router.put("/{todo_id}", response_model=ApiResponse[TodoSchema])
def update_todo(
    todo_id: int,
    todo_in: TodoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update a todo; fields left out keep their current value
    """
    todo = todo_service.update_todo(
        db, current_user, todo_id, title=todo_in.title, description=todo_in.description
    )
    return ApiResponse(
        statusCode=status.HTTP_200_OK,
        data=TodoSchema.model_validate(todo),
        message="Todo Updated Successfully",
    )


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    todo_service.delete_todo(db, current_user, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
