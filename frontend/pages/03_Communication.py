# frontend/pages/03_Communication.py
from resource_page import render_resource_page

render_resource_page("communication")
