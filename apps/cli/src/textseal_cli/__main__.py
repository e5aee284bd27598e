from .main import app_main

app_main()
