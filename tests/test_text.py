import pytest

from drills.text import MAX_SIZE, reverse


def test_reverse_known():
    assert reverse("abcd") == "dcba"


def test_reverse_empty():
    assert reverse("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "123",
        "Captain's log, Stardate 42523.7",
        "Hello, my name is Inigo Montoya.",
        "You can be my wingman anyday!",
    ],
)
def test_reverse_twice_is_identity(text):
    assert reverse(reverse(text)) == text
    assert len(reverse(text)) == len(text)


def test_reverse_first_and_last_swap():
    text = "Executor Selendis! Unleash the full power of your forces! There may be no tomorrow!"
    result = reverse(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]


def test_reverse_long_text_is_truncated():
    text = "".join(str(i % 10) for i in range(150))
    result = reverse(text)
    assert len(result) == MAX_SIZE - 1
    assert reverse(result) == text[: MAX_SIZE - 1]