from pymongo.errors import CollectionInvalid
from seeding.payload import SEED_PAYLOAD, seed_message


def ensure_collection(db, name: str) -> bool:
    """
    Create the collection if it is missing.
    Returns True only when this call created it.
    """
    if name in db.list_collection_names():
        return False
    try:
        db.create_collection(name)
    except CollectionInvalid:
        # Created by someone else between the listing and the create
        return False
    return True


def insert_seed_record(db, collection_name: str, record: dict):
    # Copy so insert_one doesn't write _id into the shared payload
    res = db[collection_name].insert_one(dict(record))
    return res.inserted_id


def run(db, payload: dict = SEED_PAYLOAD):
    ensure_collection(db, payload["collection"])
    insert_seed_record(db, payload["insert_collection"], payload["record"])
    print(seed_message(payload))


def seed_status(db, payload: dict = SEED_PAYLOAD) -> dict:
    existing = set(db.list_collection_names())
    status = {}
    for name in (payload["collection"], payload["insert_collection"]):
        status[name] = {
            "exists": name in existing,
            "documents": db[name].count_documents({}) if name in existing else 0,
        }
    return status


def reset(db, payload: dict = SEED_PAYLOAD):
    db[payload["collection"]].drop()
    db[payload["insert_collection"]].drop()
    print("✅ Collections dropped")
