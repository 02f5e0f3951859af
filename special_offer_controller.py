# special_offer_controller.py
from __future__ import annotations

from crud_controller import CrudController
from errors import OutOfRange
from transport_domain import SpecialOffer
from transport_enums import DiscountType, OfferStatus
from validators import Validator


class SpecialOfferController(CrudController[SpecialOffer]):
    title = "Спецпредложения"
    entity_label = "спецпредложение"

    def _prompt_discount(self, discount_type: DiscountType) -> float:
        """Процент — от 0 до 100, фиксированная сумма — просто не меньше 0."""

        def parse(raw: str) -> float:
            value = Validator.decimal(raw, minimum=0)
            if discount_type is DiscountType.PERCENTAGE and value > 100:
                raise OutOfRange("Процент скидки должен быть от 0 до 100.")
            return value

        return self.validator.read_until_valid(
            "Размер скидки: ", parse, "Введите число, например 15 или 12.5."
        )

    def _collect(self, current: SpecialOffer | None) -> SpecialOffer:
        v = self.validator
        offer_name = v.prompt_string("Название предложения: ", "Название не может быть пустым.")
        description = v.prompt_text("Описание (можно пусто): ")
        start_date = v.prompt_timestamp("Дата начала (yyyy-MM-dd HH:mm:ss): ")
        end_date = v.prompt_timestamp("Дата окончания (yyyy-MM-dd HH:mm:ss): ")
        self.console.say("Тип скидки:")
        discount_type = self.selector.choose_enum(DiscountType)
        discount_value = self._prompt_discount(discount_type)
        conditions = v.prompt_text("Условия (можно пусто): ")
        self.console.say("Статус предложения:")
        offer_status = self.selector.choose_enum(OfferStatus)

        fields = dict(
            offer_name=offer_name,
            description=description,
            start_date=start_date,
            end_date=end_date,
            discount_type=discount_type,
            discount_value=discount_value,
            conditions=conditions,
            offer_status=offer_status,
        )
        if current is None:
            return SpecialOffer(offer_id=None, **fields)
        for name, value in fields.items():
            setattr(current, name, value)
        return current

    def _release(self, offer: SpecialOffer) -> bool:
        if self.contracts is None:
            return True
        for contract in self.contracts.get_all():
            if contract.remove_special_offer(offer.offer_id) is not None:
                self.contracts.replace_by_id(contract.contract_id, contract)
                self.console.say(f"Спецпредложение отвязано от договора {contract.contract_id}")
        return True
