import pytest

from tdas.errors import EmptyStackError
from tdas.pila import Stack


def _assert_empty(stack):
    assert stack.is_empty()
    assert len(stack) == 0
    for operation in (stack.pop, stack.peek):
        with pytest.raises(EmptyStackError, match="La pila esta vacia"):
            operation()


def test_new_stack_is_empty():
    _assert_empty(Stack())


@pytest.mark.parametrize("elements", [["h"], [1, 2.78, 3.5, 4, 5.999]])
def test_empty_after_popping_everything(elements):
    stack = Stack()
    for elem in elements:
        stack.push(elem)
    assert [stack.pop() for _ in elements] == list(reversed(elements))
    _assert_empty(stack)


@pytest.mark.parametrize(
    "elements", [["1", "2", "3", "4", "5", "6", "7", "8", "11"], [1]]
)
def test_not_empty_after_pushing(elements):
    stack = Stack()
    for elem in elements:
        stack.push(elem)
    assert not stack.is_empty()
    assert len(stack) == len(elements)


def test_peek_follows_push():
    stack = Stack()
    for elem in ["h", "j", "7", "hola"]:
        stack.push(elem)
        assert stack.peek() == elem


def test_pop_order():
    stack = Stack()
    for elem in [1, 2, 3, 4, 5]:
        stack.push(elem)
    for elem in [5, 4, 3, 2, 1]:
        assert stack.peek() == elem
        assert stack.pop() == elem
    _assert_empty(stack)


def test_volume():
    volume = 100000
    stack = Stack()
    for i in range(volume):
        stack.push(i)
        assert stack.peek() == i
    assert len(stack) == volume
    for i in reversed(range(volume)):
        assert stack.peek() == i
        assert stack.pop() == i
    _assert_empty(stack)