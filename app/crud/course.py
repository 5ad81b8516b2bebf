from app.crud.base import CRUDBase
from app.models.course import Course

class CRUDCourse(CRUDBase[Course, dict, dict]):
    pass

course = CRUDCourse(Course)
