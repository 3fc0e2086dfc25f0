# frontend/pages/01_Accounting.py
from resource_page import render_resource_page

render_resource_page("accounting")
