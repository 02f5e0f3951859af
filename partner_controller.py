# partner_controller.py
from __future__ import annotations

from crud_controller import CrudController
from transport_domain import Partner
from transport_enums import PartnerStatus, TransportType


class PartnerController(CrudController[Partner]):
    title = "Партнёры"
    entity_label = "партнёр"

    def _collect(self, current: Partner | None) -> Partner:
        v = self.validator
        company_name = v.prompt_string("Название компании: ", "Название не может быть пустым.")
        commercial_contact = v.prompt_string("Коммерческий контакт: ", "Контакт не может быть пустым.")
        transport_type = v.prompt_enum_member(
            f"Тип транспорта ({', '.join(t.name for t in TransportType)}): ", TransportType
        )
        geographical_zone = v.prompt_string("Географическая зона: ", "Зона не может быть пустой.")
        special_conditions = v.prompt_text("Особые условия (можно пусто): ")
        self.console.say("Статус партнёра:")
        partner_status = self.selector.choose_enum(PartnerStatus)

        fields = dict(
            company_name=company_name,
            commercial_contact=commercial_contact,
            transport_type=transport_type,
            geographical_zone=geographical_zone,
            special_conditions=special_conditions,
            partner_status=partner_status,
        )
        if current is None:
            return Partner(partner_id=None, **fields)
        # На партнёра ссылаются договоры: меняем поля на месте, когда все ответы уже получены
        for name, value in fields.items():
            setattr(current, name, value)
        return current

    def _release(self, partner: Partner) -> bool:
        """Партнёра, на которого ссылаются договоры, не удаляем."""
        if self.contracts is None:
            return True
        bound = [
            c.contract_id
            for c in self.contracts.get_all()
            if c.partner.partner_id == partner.partner_id
        ]
        if bound:
            self.console.say(
                f"✗ Партнёр {partner.partner_id} указан в договорах: {', '.join(bound)}. "
                "Сначала удалите или измените эти договоры."
            )
            return False
        return True
