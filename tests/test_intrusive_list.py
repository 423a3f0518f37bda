from protoscheme.intrusive_list import ListDir, ListItem, reverse_dir


def test_directions():
    assert ListDir.DEFAULT is ListDir.RIGHT
    assert ListDir.RDEFAULT is ListDir.LEFT
    assert reverse_dir(ListDir.RIGHT) is ListDir.LEFT
    assert reverse_dir(ListDir.LEFT) is ListDir.RIGHT


def test_chain_order():
    head = None
    items = []
    for i in range(200):
        head = ListItem(i, head)
        items.append(head)
    assert list(head) == list(reversed(range(200)))
    assert items[0].next is None
    assert head.prev is None
    assert items[0].prev is items[1]


def test_second_list_independent():
    head = None
    first_list = []
    second_list = []
    for i in range(300):
        head = ListItem(i, head)
        first_list.append(head)
        second = ListItem(i)
        second_list.append(second)
        if i % 100 == 0 and i > 100:
            second.attach(second_list[i - 100])
    assert list(second_list[200]) == [200, 100]
    assert list(head)[-1] == 0
    assert first_list[200].next is first_list[199]


def test_attach_inserts_between():
    a, b, c = ListItem("a"), ListItem("b"), ListItem("c")
    a.attach(c)
    b.attach(c)
    assert list(a) == ["a", "b", "c"]
    assert c.prev is b
    assert b.prev is a


def test_attach_left():
    a, b = ListItem("a"), ListItem("b")
    b.attach_in_dir(a, ListDir.LEFT)
    assert b.peer(ListDir.LEFT) is a
    assert a.peer(ListDir.RIGHT) is b
    assert list(a) == ["a", "b"]


def test_constructor_with_direction():
    a = ListItem("a")
    b = ListItem("b", a, ListDir.LEFT)
    assert a.next is b
    assert b.prev is a


def test_detach_relinks_neighbours():
    first = ListItem(0)
    middle = ListItem(1, first)
    head = ListItem(2, middle)
    middle.detach()
    assert middle.next is None and middle.prev is None
    assert list(head) == [2, 0]
    assert first.prev is head


def test_detach_all():
    head = None
    for i in range(50):
        head = ListItem(i, head)
    item = head
    while item is not None:
        following = item.next
        item.detach()
        assert list(item) == [item.owner]
        item = following
    assert head.next is None