import logging
from typing import List, Optional

import aiosqlite

from homework.database import execute, fetch_all, load_sql
from homework.schemas.assignment import AssignmentDetail, AssignmentForm, AssignmentSummary

READ_ASSIGNMENTS_ALL_SQL = load_sql("read_assignments_all")
READ_ASSIGNMENT_DETAIL_SQL = load_sql("read_assignment_detail")
DELETE_ASSIGNMENT_SQL = load_sql("delete_assignment")
CREATE_ASSIGNMENT_SQL = load_sql("create_assignment")
UPDATE_ASSIGNMENT_SQL = load_sql("update_assignment")


async def get_all_assignments(
    connection: aiosqlite.Connection, logger: logging.Logger
) -> List[AssignmentSummary]:
    """すべての課題を新しい順 (assignmentId の降順) に返す"""
    rows = await fetch_all(connection, READ_ASSIGNMENTS_ALL_SQL)
    logger.debug("read_assignments_all: %d rows", len(rows))
    return [AssignmentSummary.model_validate(dict(row)) for row in rows]


async def get_assignment(
    connection: aiosqlite.Connection, assignment_id: int, logger: logging.Logger
) -> Optional[AssignmentDetail]:
    """
    id が一致する課題を1件返す。
    見つからなければ None を返す。
    """
    rows = await fetch_all(connection, READ_ASSIGNMENT_DETAIL_SQL, [assignment_id])
    logger.debug("read_assignment_detail(%s): %d rows", assignment_id, len(rows))
    if not rows:
        return None
    return AssignmentDetail.model_validate(dict(rows[0]))


async def delete_assignment(
    connection: aiosqlite.Connection, assignment_id: int, logger: logging.Logger
) -> int:
    cursor = await execute(connection, DELETE_ASSIGNMENT_SQL, [assignment_id])
    logger.debug("delete_assignment(%s): %d rows affected", assignment_id, cursor.rowcount)
    return cursor.rowcount


async def create_assignment(
    connection: aiosqlite.Connection, form: AssignmentForm, logger: logging.Logger
) -> int:
    """課題を追加し、DBが採番した assignmentId を返す"""
    cursor = await execute(
        connection,
        CREATE_ASSIGNMENT_SQL,
        [form.title, form.priority, form.subject_id, form.due_date],
    )
    logger.debug("create_assignment: new id %s", cursor.lastrowid)
    return cursor.lastrowid


async def update_assignment(
    connection: aiosqlite.Connection,
    assignment_id: int,
    form: AssignmentForm,
    logger: logging.Logger,
) -> int:
    # 存在しない id の場合は0件更新となるだけでエラーにはしない
    cursor = await execute(
        connection,
        UPDATE_ASSIGNMENT_SQL,
        [
            form.title,
            form.priority,
            form.subject_id,
            form.due_date,
            form.description,
            assignment_id,
        ],
    )
    logger.debug("update_assignment(%s): %d rows affected", assignment_id, cursor.rowcount)
    return cursor.rowcount
