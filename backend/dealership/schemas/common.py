# dealership/schemas/common.py
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints

MONEY_PLACES = Decimal("0.01")  # 2 hane


def _to_money(v: Decimal) -> Decimal:
    # Sayıyı 2 haneye ROUND_HALF_UP yuvarla, negatif olamaz
    try:
        d = v if isinstance(v, Decimal) else Decimal(str(v))
        d = d.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError("must be a valid decimal")
    if d < 0:
        raise ValueError("must be >= 0")
    return d


Money = Annotated[Decimal, AfterValidator(_to_money)]
Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CreateModel(BaseModel):
    """Oluşturma gövdeleri: bilinmeyen alanlar sessizce yok sayılır."""
    model_config = ConfigDict(extra="ignore")


class PatchModel(BaseModel):
    """Kısmi güncelleme: yalnızca gönderilen alanlar yazılır (exclude_unset)."""
    model_config = ConfigDict(extra="ignore")

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
