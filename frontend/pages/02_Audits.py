# frontend/pages/02_Audits.py
from resource_page import render_resource_page

render_resource_page("audits")
