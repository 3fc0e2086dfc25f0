# frontend/pages/11_Service_History.py
from resource_page import render_resource_page

render_resource_page("service-history")
