# Messages

# SUCCESS
SUCCESS_LOGOUT = "Вы успешно вышли"

# FAIL
FAIL_VALIDATION_MATCHED_USER_ID = "Нет пользователя с таким ID."
FAIL_VALIDATION_MATCHED_POST_ID = "Нет тьюта с таким ID."
FAIL_VALIDATION_MATCHED_DISLIKE_ID = "Дизлайк не найден."
FAIL_USER_NOT_FOUND = "Пользователь не найден."
FAIL_USER_ALREADY_EXISTS = "Пользователь уже существует."

FAIL_DISLIKE_CONFLICT = "Дизлайк был изменён параллельным запросом, повторите попытку."
FAIL_DISLIKE_TOGGLE = "Не удалось изменить дизлайк."
FAIL_DISLIKE_DELETE = "Не удалось удалить дизлайк."

FAIL_AUTH_CHECK = "Аунтефикация не пройдена."
FAIL_AUTH_NO_PROFILE = "Нет активной сессии."
FAIL_INVALID_TOKEN = "Неверный токен."
FAIL_AUTH_VALIDATION_CREDENTIAL = "Неверные данные авторизации."

# --------
