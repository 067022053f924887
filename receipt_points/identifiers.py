import uuid

def new_receipt_id() -> str:
    """Random (version 4) UUID in its canonical 36-character text form."""
    return str(uuid.uuid4())
