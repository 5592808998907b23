from sqlalchemy.orm import Session
from models.log import Log

# Stages an audit entry; it is committed together with the change it describes
def write_log(db: Session, *, actor, action, resource, status="SUCCESS", meta=None):
    entry = Log(actor=actor, action=action, resource=resource, status=status, meta=meta or {})
    db.add(entry)
    return entry
