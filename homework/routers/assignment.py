# homework/routers/assignment.py

import logging
from typing import Optional

import aiosqlite
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from homework.database import get_connection
from homework.log import get_logger
from homework.routers.webapp import templates
from homework.schemas.assignment import AssignmentForm
from homework.services import assignment

router = APIRouter()


@router.get("/assignments", response_class=HTMLResponse)
async def show_assignments(
    request: Request,
    connection: aiosqlite.Connection = Depends(get_connection),
    logger: logging.Logger = Depends(get_logger),
):
    """課題一覧ページ"""
    hwlist = await assignment.get_all_assignments(connection, logger)
    return templates.TemplateResponse(request, "assignments.html", {"hwlist": hwlist})


@router.get("/assignments/{assignment_id}", response_class=HTMLResponse)
async def show_assignment_detail(
    request: Request,
    assignment_id: int,
    connection: aiosqlite.Connection = Depends(get_connection),
    logger: logging.Logger = Depends(get_logger),
):
    """課題の詳細ページ。該当する課題がなければ 404 を返す"""
    hw = await assignment.get_assignment(connection, assignment_id, logger)
    if hw is None:
        raise HTTPException(
            status_code=404,
            detail=f'No assignment found with id = "{assignment_id}"',
        )
    return templates.TemplateResponse(request, "detail.html", {"hw": hw})


@router.get("/assignments/{assignment_id}/delete")
async def delete_assignment(
    assignment_id: int,
    connection: aiosqlite.Connection = Depends(get_connection),
    logger: logging.Logger = Depends(get_logger),
):
    """課題を削除して一覧に戻る。存在しない id でも一覧に戻る"""
    await assignment.delete_assignment(connection, assignment_id, logger)
    return RedirectResponse("/assignments", status_code=302)


@router.post("/assignments")
async def create_assignment(
    title: Optional[str] = Form(None),
    priority: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    due_date: Optional[str] = Form(None, alias="dueDate"),
    connection: aiosqlite.Connection = Depends(get_connection),
    logger: logging.Logger = Depends(get_logger),
):
    """フォームから課題を追加し、追加した課題の詳細ページに移動する"""
    form = AssignmentForm(
        title=title, priority=priority, subject_id=subject, due_date=due_date
    )
    new_id = await assignment.create_assignment(connection, form, logger)
    return RedirectResponse(f"/assignments/{new_id}", status_code=302)


@router.post("/assignments/{assignment_id}")
async def update_assignment(
    assignment_id: int,
    title: Optional[str] = Form(None),
    priority: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    due_date: Optional[str] = Form(None, alias="dueDate"),
    description: Optional[str] = Form(None),
    connection: aiosqlite.Connection = Depends(get_connection),
    logger: logging.Logger = Depends(get_logger),
):
    """フォームの内容で課題を上書きし、詳細ページに戻る"""
    form = AssignmentForm(
        title=title,
        priority=priority,
        subject_id=subject,
        due_date=due_date,
        description=description,
    )
    await assignment.update_assignment(connection, assignment_id, form, logger)
    return RedirectResponse(f"/assignments/{assignment_id}", status_code=302)
