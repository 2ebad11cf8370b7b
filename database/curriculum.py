# database/curriculum.py

"""Curriculum management - classes, subjects, lessons and homework templates"""

import logging

from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)


def _fetch_ordered(table, column, value, order_by):
    try:
        response = get_client().table(table).select("*").eq(column, value).order(order_by).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching {table} for {column}={value}: {error_message(e)}")
        return []
    return response_data(response, [])


def _insert_one(table, row):
    try:
        get_client().table(table).insert([row]).execute()
    except BACKEND_ERRORS as e:
        logger.warning(f"Failed to add {table} row {row}: {error_message(e)}")
        return False
    logger.info(f"Added {table} row {row}")
    return True


def fetch_school_classes(school_id):
    """
    Get all classes of a school

    Returns:
        list: school_classes rows ordered by class_name
    """
    return _fetch_ordered("school_classes", "school_id", school_id, "class_name")


def fetch_class_subjects(class_id):
    """Get the subjects of a class ordered by name"""
    return _fetch_ordered("class_subjects", "class_id", class_id, "subject_name")


def fetch_subject_lessons(subject_id):
    """Get the lessons of a subject ordered by name"""
    return _fetch_ordered("subject_lessons", "subject_id", subject_id, "lesson_name")


def fetch_lesson_homework(lesson_id):
    """Get a lesson's homework templates in creation order"""
    return _fetch_ordered("lesson_homework", "lesson_id", lesson_id, "created_at")


def add_school_class(school_id, class_name):
    """
    Create a class

    Returns:
        bool: True if created successfully, False otherwise
    """
    return _insert_one("school_classes", {"school_id": school_id, "class_name": class_name})


def add_class_subject(class_id, subject_name):
    """Add a subject to a class"""
    return _insert_one("class_subjects", {"class_id": class_id, "subject_name": subject_name})


def add_subject_lesson(subject_id, lesson_name):
    """Add a lesson to a subject"""
    return _insert_one("subject_lessons", {"subject_id": subject_id, "lesson_name": lesson_name})


def add_lesson_homework(lesson_id, template):
    """Add a homework template to a lesson"""
    return _insert_one("lesson_homework", {"lesson_id": lesson_id, "homework_template": template})


def delete_lesson_homework(homework_id):
    """
    Delete a homework template

    Returns:
        bool: True if the request succeeded, False otherwise
    """
    try:
        get_client().table("lesson_homework").delete().eq("id", homework_id).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to delete homework template {homework_id}: {error_message(e)}")
        return False
    logger.info(f"Homework template {homework_id} deleted")
    return True
