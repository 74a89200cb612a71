import bcrypt

SALT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72
MASKED_PASSWORD = "*****"


def get_password_hash(password: str) -> str:
    """Хэширует пароль через bcrypt"""
    salt = bcrypt.gensalt(rounds=SALT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверяет пароль по bcrypt-хэшу"""
    password = plain_password.encode("utf-8")
    # такой пароль не мог быть захэширован
    if len(password) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password, hashed_password.encode("utf-8"))
