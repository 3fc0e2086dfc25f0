# frontend/pages/12_Service_Scheduling.py
from resource_page import render_resource_page

render_resource_page("service-scheduling")
