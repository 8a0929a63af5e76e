from api.app_factory import serve

serve()
