# frontend/pages/07_Order_Management.py
from resource_page import render_resource_page

render_resource_page("order-management")
