# 📄 File: authuser/modules/user_management/domain/models/course.py
# 🧭 Purpose (Layman Explanation):
# A short description of a course a user is enrolled in, as reported by the course service.
# 🧪 Purpose (Technical Summary):
# Read-only projection of the course service's course resource. Unknown fields are ignored
# and every display attribute is optional so schema drift on the remote side does not break us.
# 🔗 Dependencies:
# pydantic (CamelModel)
# 🔄 Connected Modules / Calls From:
# course_client.py, users API (GET /users/{userId}/courses)

import uuid
from typing import Optional

from authuser.shared.core.pagination import CamelModel


class CourseSummary(CamelModel):
    course_id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    course_status: Optional[str] = None
    course_level: Optional[str] = None
    user_instructor: Optional[uuid.UUID] = None
