from typing import List
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select
from hobbies.core.errors import StorageConstraintError, StorageUnavailableError, storage_error_detail
from hobbies.models import Person
import logging

logger = logging.getLogger(__name__)

def list_all(session: Session) -> List[Person]:
    """every person in the table, in the engine's natural order"""
    try:
        return list(session.exec(select(Person)).all())
    except SQLAlchemyError as e:
        logger.error(f"failed to list people: {storage_error_detail(e)}", exc_info=True)
        raise StorageUnavailableError("could not read people") from e

def insert(session: Session, name: str, hobby: str) -> Person:
    """store one person and return it with its generated id"""
    person = Person(name=name, hobby=hobby)
    try:
        session.add(person)
        session.commit()
        session.refresh(person)
    except IntegrityError as e:
        session.rollback()
        detail = storage_error_detail(e)
        logger.warning(f"insert rejected by database: {detail}")
        raise StorageConstraintError(detail) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"failed to insert person: {storage_error_detail(e)}", exc_info=True)
        raise StorageUnavailableError("could not save person") from e

    logger.info(f"saved person {person.id}")
    return person
