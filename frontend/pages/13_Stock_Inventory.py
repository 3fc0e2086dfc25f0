# frontend/pages/13_Stock_Inventory.py
from resource_page import render_resource_page

render_resource_page("stock-inventory")
