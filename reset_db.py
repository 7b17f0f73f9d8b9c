from seeding.config import connect
from seeding.payload import SEED_PAYLOAD
from seeding.seeder import reset


def main():
    client = connect()
    try:
        reset(client[SEED_PAYLOAD["database"]], SEED_PAYLOAD)
    finally:
        client.close()


if __name__ == "__main__":
    main()
