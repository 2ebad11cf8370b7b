# database/__init__.py

"""
Database package - Data access for the School Dashboard (Supabase/PostgREST)
"""

from .connection import get_client, set_client, response_data

from .utils import (
    get_ist_date,
    parse_date,
    is_subscription_active,
    get_school_uuid,
)

from .attendance import (
    fetch_daily_attendance_status,
    fetch_class_attendance_today,
    submit_attendance,
    fetch_attendance_history,
    summarize_attendance_history,
)

from .notices import (
    fetch_notices,
    submit_notice,
    delete_notice,
)

from .analytics import (
    build_teacher_progress,
    fetch_principal_analytics,
    classify_homework_status,
    fetch_homework_analytics,
    compute_attendance_completion,
)

from .periods import (
    fetch_teacher_history,
    submit_period_data,
    fetch_parent_homework,
    parse_period_number,
    update_parent_homework_status,
)

from .vehicles import (
    fetch_vehicles,
    upsert_vehicle,
    update_vehicle_location,
)

from .leaves import (
    apply_for_leave,
    fetch_user_leaves,
    fetch_school_leaves,
    update_leave_status,
    apply_student_leave,
    fetch_student_leaves_for_parent,
    fetch_school_student_leaves,
    update_student_leave_status,
)

from .curriculum import (
    fetch_school_classes,
    fetch_class_subjects,
    fetch_subject_lessons,
    fetch_lesson_homework,
    add_school_class,
    add_class_subject,
    add_subject_lesson,
    add_lesson_homework,
    delete_lesson_homework,
)

from .schools import (
    fetch_school_summary,
    update_school_periods,
    fetch_school_user_list,
)

from .students import (
    fetch_students_for_class,
    fetch_parent_children,
    find_student_for_user,
)

from .dashboard import fetch_dashboard_data

__all__ = [
    # Connection
    'get_client',
    'set_client',
    'response_data',

    # Utils
    'get_ist_date',
    'parse_date',
    'is_subscription_active',
    'get_school_uuid',

    # Attendance
    'fetch_daily_attendance_status',
    'fetch_class_attendance_today',
    'submit_attendance',
    'fetch_attendance_history',
    'summarize_attendance_history',

    # Notices
    'fetch_notices',
    'submit_notice',
    'delete_notice',

    # Analytics
    'build_teacher_progress',
    'fetch_principal_analytics',
    'classify_homework_status',
    'fetch_homework_analytics',
    'compute_attendance_completion',

    # Periods & homework
    'fetch_teacher_history',
    'submit_period_data',
    'fetch_parent_homework',
    'parse_period_number',
    'update_parent_homework_status',

    # Vehicles
    'fetch_vehicles',
    'upsert_vehicle',
    'update_vehicle_location',

    # Leaves
    'apply_for_leave',
    'fetch_user_leaves',
    'fetch_school_leaves',
    'update_leave_status',
    'apply_student_leave',
    'fetch_student_leaves_for_parent',
    'fetch_school_student_leaves',
    'update_student_leave_status',

    # Curriculum
    'fetch_school_classes',
    'fetch_class_subjects',
    'fetch_subject_lessons',
    'fetch_lesson_homework',
    'add_school_class',
    'add_class_subject',
    'add_subject_lesson',
    'add_lesson_homework',
    'delete_lesson_homework',

    # Schools & students
    'fetch_school_summary',
    'update_school_periods',
    'fetch_school_user_list',
    'fetch_students_for_class',
    'fetch_parent_children',
    'find_student_for_user',

    # Dashboard
    'fetch_dashboard_data',
]
