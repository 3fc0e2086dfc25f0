# frontend/pages/05_Customer_Engagements.py
from resource_page import render_resource_page

render_resource_page("customer-engagements")
