# tests/test_meta.py
from __future__ import annotations
import pytest

from enumeration import Enumeration, EnumerationMeta, InvalidDeclaration, UndefinedMember
from enumeration.table import member_table


class TestDynamicAccess:
    def test_call_returns_cached_instance(self, animal):
        assert animal("Horse") is animal("Horse")
        assert animal("Horse") is animal.instance_of("Horse")

    def test_call_with_instance(self, animal):
        dog = animal("Dog")
        assert animal(dog) is dog

    def test_call_unknown(self, animal):
        with pytest.raises(UndefinedMember, match="'Cat'"):
            animal("Cat")

    @pytest.mark.parametrize("args, kwargs", [((), {}), (("Horse", "Dog"), {}), ((), {"name": "Horse"})])
    def test_call_arity(self, animal, args, kwargs):
        with pytest.raises(TypeError, match="takes exactly one member name"):
            animal(*args, **kwargs)

    def test_getitem(self, animal):
        assert animal["Dog"] is animal("Dog")
        with pytest.raises(UndefinedMember):
            animal["Cat"]

    def test_raw_constants_stay_readable(self, animal):
        assert animal.Horse == 0
        assert animal.Dog == 1


class TestClassProtocol:
    def test_contains(self, animal, color):
        assert "Horse" in animal
        assert animal("Dog") in animal
        assert "Cat" not in animal
        assert 0 not in animal
        assert color("Red") not in animal

    def test_iter_and_len(self, color):
        assert [str(c) for c in color] == ["Red", "Green", "Blue"]
        assert len(color) == 3

    def test_empty_is_still_truthy(self, empty):
        assert len(empty) == 0
        assert bool(empty)
        assert list(empty) == []

    def test_repr(self, animal):
        assert repr(animal) == "<enumeration 'Animal'>"

    def test_metaclass(self, animal):
        assert isinstance(animal, EnumerationMeta)


class TestClassMethods:
    def test_lookups(self, animal):
        assert animal.value_of("Dog") == 1
        assert animal.name_of(1) == "Dog"
        assert animal.is_defined("Horse")
        assert not animal.is_defined("Cat")
        assert animal.all_names() == ["Horse", "Dog"]
        assert animal.to_dict() == {"Horse": 0, "Dog": 1}
        assert animal.type_name() == "Animal"

    def test_aliases(self, animal):
        assert animal.named("Horse") == 0
        assert animal.with_value(0) == "Horse"
        assert animal.contains("Dog") and animal.has("Dog") and animal.defines("Dog")
        assert animal.all_members() == ["Horse", "Dog"]

    def test_members(self, animal):
        assert animal.members() == [animal("Horse"), animal("Dog")]

    def test_callable_on_instances(self, animal):
        assert animal("Dog").value_of("Horse") == 0

    def test_name_of_type_sensitive(self, animal):
        with pytest.raises(UndefinedMember):
            animal.name_of("0")


class TestClassImmutability:
    def test_cannot_reassign_member(self):
        class Fixed(Enumeration):
            A = 1

        with pytest.raises(AttributeError, match="EN0105: cannot reassign member 'A'"):
            Fixed.A = 2
        assert Fixed.A == 1
        assert Fixed.value_of("A") == 1

    def test_cannot_delete_member(self):
        class Fixed(Enumeration):
            A = 1

        with pytest.raises(AttributeError, match="EN0105: cannot delete member 'A'"):
            del Fixed.A

    def test_later_attributes_are_not_members(self):
        class Fixed(Enumeration):
            A = 1

        Fixed.B = 2
        assert not Fixed.is_defined("B")
        assert Fixed.all_names() == ["A"]


class TestDeclaration:
    def test_helpers_are_not_members(self):
        class Direction(Enumeration):
            North = "N"
            South = "S"

            def opposite(self):
                return Direction("South") if self.name == "North" else Direction("North")

            @property
            def letter(self):
                return self.value

            @classmethod
            def default(cls):
                return cls("North")

        assert Direction.all_names() == ["North", "South"]
        assert Direction("North").opposite() is Direction("South")
        assert Direction.default().letter == "N"

    def test_non_scalar_member(self):
        with pytest.raises(InvalidDeclaration) as info:
            class Bad(Enumeration):
                Pair = (1, 2)
        assert info.value.code == "EN0102"
        assert info.value.enumeration == "Bad"

    @pytest.mark.parametrize("reserved", ["value", "name", "value_of", "members", "has"])
    def test_reserved_names(self, reserved):
        with pytest.raises(InvalidDeclaration, match="EN0104"):
            type("Bad", (Enumeration,), {reserved: 1})

    def test_invalid_name_through_type(self):
        with pytest.raises(InvalidDeclaration, match="EN0101"):
            type("Bad", (Enumeration,), {"two words": 1})

    def test_unique_keyword(self):
        with pytest.raises(InvalidDeclaration, match="EN0106"):
            class Codes(Enumeration, unique=True):
                Ok = 0
                Fine = 0

    def test_unique_allows_distinct_types(self):
        class Codes(Enumeration, unique=True):
            Zero = 0
            Text = "0"

        assert Codes.name_of("0") == "Text"

    def test_unknown_keyword(self):
        with pytest.raises(TypeError):
            class Codes(Enumeration, frozen=True):
                Ok = 0


class TestInheritance:
    def test_members_are_inherited_first(self):
        class Base(Enumeration):
            A = 1
            B = 2

        class Child(Base):
            C = 3

        assert Child.all_names() == ["A", "B", "C"]
        assert Base.all_names() == ["A", "B"]
        assert Child.value_of("A") == 1
        assert not Base.is_defined("C")

    def test_each_class_has_its_own_instances(self):
        class Base(Enumeration):
            A = 1

        class Child(Base):
            B = 2

        assert Child("A") is not Base("A")
        assert type(Child("A")) is Child
        with pytest.raises(UndefinedMember):
            Child(Base("A"))
        assert Child.type_name() == "Child"

    def test_redeclaring_inherited_member(self):
        class Base(Enumeration):
            A = 1

        with pytest.raises(InvalidDeclaration, match="EN0103"):
            class Child(Base):
                A = 2

    def test_unique_is_inherited(self):
        class Base(Enumeration, unique=True):
            A = 1

        with pytest.raises(InvalidDeclaration, match="EN0106"):
            class Child(Base):
                B = 1

    def test_unique_can_be_switched_off(self):
        class Base(Enumeration, unique=True):
            A = 1

        class Child(Base, unique=False):
            B = 1

        assert Child.name_of(1) == "A"

    def test_mixin_helpers(self):
        class Describe:
            def describe(self):
                return f"{type(self).__name__}:{self}"

        class Size(Describe, Enumeration):
            Small = "S"
            Large = "L"

        assert Size.all_names() == ["Small", "Large"]
        assert Size("Large").describe() == "Size:Large"
