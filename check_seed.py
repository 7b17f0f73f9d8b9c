from seeding.config import connect
from seeding.payload import SEED_PAYLOAD
from seeding.seeder import seed_status


def main():
    client = connect()
    try:
        status = seed_status(client[SEED_PAYLOAD["database"]], SEED_PAYLOAD)
    finally:
        client.close()

    print(f"=== {SEED_PAYLOAD['database']} ===")
    for name, s in status.items():
        mark = "✅" if s["exists"] else "❌"
        noun = "document" if s["documents"] == 1 else "documents"
        print(f"{mark} {name}: {s['documents']} {noun}")


if __name__ == "__main__":
    main()
