from gherkin_kit.item_queue import ItemQueue


def test_empty_queue():
    queue = ItemQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert queue.remove() is None
    assert queue.pop() is None
    assert queue.peek() is None


def test_add_is_first_in_first_out():
    queue = ItemQueue()
    for item in ("a", "b", "c"):
        queue.add(item)
    assert list(queue) == ["a", "b", "c"]
    assert queue.remove() == "a"
    assert list(queue) == ["b", "c"]


def test_push_puts_item_in_front():
    queue = ItemQueue()
    queue.add("second")
    queue.push("first")
    assert list(queue) == ["first", "second"]
    assert queue.pop() == "first"


def test_push_on_empty_queue():
    queue = ItemQueue()
    queue.push("only")
    assert queue.peek() == "only"
    assert len(queue) == 1


def test_peek_does_not_remove():
    queue = ItemQueue(["x", "y"])
    assert queue.peek() == "x"
    assert len(queue) == 2
    assert queue.remove() == "x"


def test_extend_moves_all_items():
    queue = ItemQueue(["a"])
    other = ItemQueue(["b", "c"])
    queue.extend(other)
    assert list(queue) == ["a", "b", "c"]
    assert other.is_empty()
    assert len(other) == 0


def test_len_tracks_adds_and_removes():
    queue = ItemQueue()
    items = list(range(5))
    for item in items:
        queue.add(item)
    assert len(queue) == len(items)
    drained = [queue.remove() for _ in items]
    assert drained == items
    assert queue.is_empty()


def test_queue_usable_after_draining():
    queue = ItemQueue(["a"])
    queue.remove()
    queue.add("b")
    assert list(queue) == ["b"]