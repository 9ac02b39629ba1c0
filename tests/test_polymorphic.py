"""Tests for discriminator-routed payloads."""

import json

import pytest
from pydantic import BaseModel

from stripe_codec.core import (
    MalformedPayloadError,
    MalformedReferenceError,
    PolymorphicPayload,
    PreconditionViolation,
    VariantDecodeError,
    VariantRegistry,
    decode_polymorphic,
)
from stripe_codec.schemas import (
    BankAccount,
    Card,
    DESTINATION_VARIANTS,
    PayoutDestination,
    RecipientTransferDestination,
)


class TestVariantRouting:
    """Registered discriminators route into exactly one variant."""

    def test_bank_account(self, bank_account):
        destination = PayoutDestination.decode(json.dumps(bank_account).encode())

        assert destination.recognized is True
        assert destination.type == "bank_account"
        assert destination.id == "ba_1"
        assert isinstance(destination.bank_account, BankAccount)
        assert destination.bank_account.bank_name == "STRIPE TEST BANK"
        assert destination.card is None
        assert destination.raw is None

    def test_card(self, card):
        destination = PayoutDestination.decode(json.dumps(card))

        assert destination.type == "card"
        assert destination.card.brand == "Visa"
        assert destination.card.exp_month == 8
        assert destination.bank_account is None

    def test_decodes_from_parsed_mapping(self, card):
        destination = decode_polymorphic(card, RecipientTransferDestination)

        assert isinstance(destination, RecipientTransferDestination)
        assert destination.card.last4 == "4242"

    def test_encodes_to_bare_id(self, card):
        destination = PayoutDestination.decode(json.dumps(card))

        assert destination.encode() == "card_1"


class TestUnrecognizedDiscriminator:
    """Unknown discriminators are kept raw and never raise."""

    def test_keeps_original_bytes(self):
        raw = b'{"id":"aa_1","object":"alipay_account","fingerprint":"xyz"}'

        destination = PayoutDestination.decode(raw)

        assert destination.recognized is False
        assert destination.discriminator == "alipay_account"
        assert destination.variant is None
        assert destination.raw == raw
        assert destination.id == "aa_1"

    def test_mapping_input_is_serialized(self):
        destination = PayoutDestination.decode({"id": "aa_1", "object": "alipay_account"})

        assert json.loads(destination.raw) == {"id": "aa_1", "object": "alipay_account"}

    def test_mapping_input_keeps_non_ascii_text(self):
        destination = PayoutDestination.decode(
            {"id": "aa_1", "object": "alipay_account", "name": "Zoë"}
        )

        assert "Zoë".encode("utf-8") in destination.raw
        assert json.loads(destination.raw)["name"] == "Zoë"


class TestDecodeFailures:
    def test_variant_shape_violation(self, card):
        card["exp_month"] = "not-a-month"

        with pytest.raises(VariantDecodeError) as exc_info:
            PayoutDestination.decode(json.dumps(card))

        assert exc_info.value.discriminator == "card"
        assert exc_info.value.cause is not None

    def test_malformed_reference_inside_variant(self, bank_account):
        bank_account["customer"] = 42

        with pytest.raises(VariantDecodeError) as exc_info:
            PayoutDestination.decode(json.dumps(bank_account).encode())

        assert exc_info.value.discriminator == "bank_account"
        assert isinstance(exc_info.value.cause, MalformedReferenceError)

    def test_missing_shared_fields(self):
        with pytest.raises(MalformedPayloadError):
            PayoutDestination.decode(b'{"object":"card"}')

    def test_not_an_object(self):
        with pytest.raises(MalformedPayloadError):
            PayoutDestination.decode(b"[1, 2]")


class Fish(BaseModel):
    id: str
    fins: int


class Bird(BaseModel):
    id: str
    wingspan: float


class TestRegistry:
    """Registries are read-only and can be extended by copying."""

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            DESTINATION_VARIANTS["alipay_account"] = BankAccount  # type: ignore[index]

    def test_with_variant_returns_new_registry(self):
        extended = DESTINATION_VARIANTS.with_variant("bitcoin_receiver", Card)

        assert "bitcoin_receiver" in extended
        assert "bitcoin_receiver" not in DESTINATION_VARIANTS
        assert extended.field == "object"

    def test_custom_payload_type(self):
        class AnimalKind(BaseModel):
            id: str
            kind: str

        class Animal(PolymorphicPayload):
            __slots__ = ()
            common_model = AnimalKind
            registry = VariantRegistry("kind", {"fish": Fish, "bird": Bird})

        fish = Animal.decode(b'{"id":"a1","kind":"fish","fins":4}')
        bird = Animal.decode(b'{"id":"a2","kind":"bird","wingspan":1.5}')

        assert fish.variant_as(Fish).fins == 4
        assert fish.variant_as(Bird) is None
        assert bird.variant_as(Bird).wingspan == 1.5

    def test_common_model_must_declare_discriminator(self):
        class NoKind(BaseModel):
            id: str

        class Broken(PolymorphicPayload):
            __slots__ = ()
            common_model = NoKind
            registry = VariantRegistry("kind", {"fish": Fish})

        with pytest.raises(PreconditionViolation):
            Broken.decode(b'{"id":"a1","kind":"fish","fins":1}')


class TestImmutability:
    def test_cannot_reassign(self, card):
        destination = PayoutDestination.decode(json.dumps(card))

        with pytest.raises(AttributeError):
            destination.discriminator = "bank_account"
