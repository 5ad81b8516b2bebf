from app.crud.base import CRUDBase
from app.models.user import User

class CRUDUser(CRUDBase[User, dict, dict]):
    pass

user = CRUDUser(User)
