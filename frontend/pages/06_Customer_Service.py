# frontend/pages/06_Customer_Service.py
from resource_page import render_resource_page

render_resource_page("customer-service")
