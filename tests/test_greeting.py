from datetime import datetime

from greeter_api.greeting import (
    GREETING,
    TIMESTAMP_PREFIX,
    build_greeting,
    build_timestamped_greeting,
)


def test_build_greeting():
    assert build_greeting() == "Hello, World!"
    assert build_greeting() == GREETING


def test_timestamp_is_zero_padded_24_hour():
    message = build_timestamped_greeting(datetime(2024, 3, 5, 17, 8, 9))
    assert message == "Hello, World! Current date and time is: 2024-03-05 17:08:09"


def test_timestamp_defaults_to_now():
    before = datetime.now().replace(microsecond=0)
    message = build_timestamped_greeting()
    after = datetime.now()

    assert message.startswith(TIMESTAMP_PREFIX)
    stamped = datetime.strptime(message[len(TIMESTAMP_PREFIX):], "%Y-%m-%d %H:%M:%S")
    assert before <= stamped <= after
