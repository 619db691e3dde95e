from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from storage import DatabaseStorage, Storage


def get_storage(db: Session = Depends(get_db)) -> Storage:
    return DatabaseStorage(db)
