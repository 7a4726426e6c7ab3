from config.logging_config import configure_logging
from config.postgres import PostgresConfig
from persistence.crypto import ScryptPasswordHasher
from persistence.user_store import PostgresUserStore
from registration.presenter import build_form_view
from registration.service import RegistrationService
from registration.state import RegistrationInput
from registration.validator import RegistrationValidator


def main():
    submissions = [
        {
            "name": "Jane Doe",
            "email": "jane@yahoo.com",
            "password": "Abcdef1!",
            "aadhar": "123456789012",
            "mobile": "9876543210",
            "address": "123 Main Street",
        },
        {
            "name": "Jane Doe",
            "email": "jane@gmail.com",
            "password": "Abcdef1!",
            "aadhar": "12345",
            "mobile": "5123456789",
            "address": "Main St",
        },
        {
            "name": "  Jane Doe ",
            "email": "jane@gmail.com",
            "password": "Abcdef1!",
            "aadhar": "123456789012",
            "mobile": "9876543210",
            "address": "123 Main Street",
        },
    ]

    configure_logging()

    # load postgres config
    pg = PostgresConfig.from_env()
    conn = pg.connect()

    store = PostgresUserStore(conn)
    store.setup()

    service = RegistrationService(
        RegistrationValidator(),
        store,
        ScryptPasswordHasher.from_env(),
    )

    for i, data in enumerate(submissions, 1):
        form = RegistrationInput(**data)
        outcome = service.register(form)
        view = build_form_view(form, outcome)
        print(f"\nSUBMISSION #{i}: {outcome.kind}")
        if view.banner:
            print("banner:", view.banner)
        for field, message in view.errors.items():
            print(f"  {field}: {message}")

    # registered users
    users = store.list_users()
    print(f"\nRegistered users: {len(users)}")
    for user in users:
        print(f"  {user.name} <{user.email}> {user.mobile}")

    conn.close()


if __name__ == "__main__":
    main()
