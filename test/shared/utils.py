from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    AUTH_LOGIN,
    EVENT_BASE,
    EVENT_TICKETS,
    USER_CREATE,
)
from test.util_constant import (
    DEFAULT_EVENT_CATEGORY,
    DEFAULT_EVENT_DATE,
    DEFAULT_EVENT_DESCRIPTION,
    DEFAULT_EVENT_NAME,
    DEFAULT_PRICE,
    DEFAULT_SEAT,
)


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Helper function to login a user and set cookies."""
    login_response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    if 'fastapiusersauth' in login_response.cookies:
        client.cookies.set('fastapiusersauth', login_response.cookies['fastapiusersauth'])
    return login_response


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(client: TestClient, email: str, password: str, name: str) -> Dict[str, Any]:
    response = client.post(USER_CREATE, json={'email': email, 'password': password, 'name': name})
    assert_response_status(response, 201)
    return response.json()


def create_event(
    client: TestClient,
    *,
    available_seats: int,
    name: str = DEFAULT_EVENT_NAME,
    date: str = DEFAULT_EVENT_DATE,
    category: str = DEFAULT_EVENT_CATEGORY,
    description: str = DEFAULT_EVENT_DESCRIPTION,
) -> Dict[str, Any]:
    response = client.post(
        EVENT_BASE,
        json={
            'name': name,
            'date': date,
            'category': category,
            'available_seats': available_seats,
            'description': description,
        },
    )
    assert_response_status(response, 201)
    return response.json()


def book_ticket(
    client: TestClient,
    event_id: int,
    headers: Dict[str, str],
    *,
    seat: str = DEFAULT_SEAT,
    price: float = DEFAULT_PRICE,
) -> Any:
    return client.post(
        EVENT_TICKETS.format(event_id=event_id),
        json={'seat': seat, 'price': price},
        headers=headers,
    )
