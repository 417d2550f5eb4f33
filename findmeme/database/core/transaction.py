# findmeme/database/core/transaction.py
from contextlib import contextmanager
from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session):
    """
    Run a block as one unit of work on `db`.
    If the caller already holds a transaction (request-scoped session),
    the block joins it and commit/rollback stays with the caller.
    """
    if db.in_transaction():
        yield db
        return
    with db.begin():
        yield db
