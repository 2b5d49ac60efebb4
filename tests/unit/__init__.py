"""Unit tests."""

config_dict: dict = {
    "name": "test",
    "github": {
        "url": "https://github.example.com/api/v3",
        "token": "ghp_test_token",
        "timeout": 10,
    },
    "parameters": {
        "expected_repository": "hello-world",
    },
}
