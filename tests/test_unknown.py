import pytest

from cub.unknown import Interface, Unknown, unknown_cast


class Worker(Interface, iid=0x1234):
    def produce(self):
        self.produced = getattr(self, "produced", 0) + 1


class SleepInfo(Interface, iid=0x2345):
    def sleep(self):
        self.sleeping = True

    def wakeup(self):
        self.sleeping = False


class ChargeInfo(Interface, iid=0x3521):
    pass


class Human(Unknown, Worker, SleepInfo):
    pass


class Robot(Unknown, Worker, ChargeInfo):
    pass


def test_cast_to_existing_interface():
    human = Human()
    worker = unknown_cast(human, Worker)
    assert worker is human
    worker.produce()
    assert human.produced == 1
    info = unknown_cast(human, SleepInfo)
    info.sleep()
    assert info.sleeping is True
    info.wakeup()
    assert info.sleeping is False


def test_cast_to_missing_interface_gives_none():
    robot = Robot()
    assert unknown_cast(robot, Worker) is robot
    assert unknown_cast(robot, SleepInfo) is None


def test_cast_of_none_is_none():
    assert unknown_cast(None, Worker) is None


def test_cast_to_by_id():
    human = Human()
    assert Unknown.cast_to(human, Worker.IID) is human
    assert Unknown.cast_to(human, ChargeInfo.IID) is None


def test_reserved_ids_never_match():
    human = Human()
    assert Unknown.cast_to(human, 0xFFFFFFFF) is None
    assert Unknown.cast_to(human, Unknown.IID) is None


def test_iid_is_declared_on_class():
    assert Worker.IID == 0x1234
    assert Unknown.IID == 0xFFFFFFFE
    robot = Robot()
    assert Unknown.cast_to(robot, 0x3521) is robot


def test_cast_requires_interface_with_id():
    with pytest.raises(TypeError):
        unknown_cast(Human(), int)
    with pytest.raises(TypeError):
        unknown_cast(Human(), Human)