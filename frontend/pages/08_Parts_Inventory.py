# frontend/pages/08_Parts_Inventory.py
from resource_page import render_resource_page

render_resource_page("parts-inventory")
