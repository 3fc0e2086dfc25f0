# frontend/pages/10_Repair_Orders.py
from resource_page import render_resource_page

render_resource_page("repair-orders")
