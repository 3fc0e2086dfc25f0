# backend/dealership/domain/constants.py

"""
Parça siparişi durumları, sunucu tarafında üretilen anahtar önekleri ve
istemciye dönen standart hata metinlerinin tek kaynağı.
"""

from typing import Final

ORDER_STATUSES: Final = ("Pending", "Confirmed", "In Transit", "Delivered", "Cancelled")
PAYMENT_STATUSES: Final = ("Pending", "Paid", "Partial", "Overdue")
DELIVERED: Final[str] = "Delivered"

# Sunucu tarafında üretilen iş anahtarları: "<önek>-<ms zaman damgası>-<9 karakter>"
PREFIX_PART: Final[str] = "PART"
PREFIX_PARTS_ORDER: Final[str] = "PO"
PREFIX_SERVICE_REQUEST: Final[str] = "SR"

ERR_MISSING_FIELDS: Final[str] = "Missing required fields"
ERR_NOTHING_TO_UPDATE: Final[str] = "No fields to update"
ERR_PART_NOT_IN_INVENTORY: Final[str] = "Part not found in inventory"
ERR_PART_HAS_ORDERS: Final[str] = "Cannot delete part with existing orders"
ERR_DELIVERED_ORDER: Final[str] = "Cannot delete delivered orders"
