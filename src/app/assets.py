"""
Caché de recursos estáticos para uso sin conexión.
"""

CACHE_NAME = 'magic-calculator-v1'

OFFLINE_ASSETS = [
    '/',
    '/index.html',
    '/style.css',
    '/script.js',
    '/manifest.json',
]


class AssetCache:
    """
    Caché de una lista fija de recursos.

    Dada una petición, retorna la respuesta guardada si existe; si no,
    la obtiene del fetcher y, opcionalmente, la guarda.
    """

    def __init__(self, fetcher, urls=None, name=CACHE_NAME, store_misses=False):
        """
        Args:
            fetcher (callable): Recibe una URL y retorna la respuesta
            urls (list): Recursos que se precargan en install()
            name (str): Nombre de la versión de la caché
            store_misses (bool): Guardar también las respuestas no precargadas
        """
        self.fetcher = fetcher
        self.urls = list(urls) if urls is not None else list(OFFLINE_ASSETS)
        self.name = name
        self.store_misses = store_misses
        self.entries = {}

    def install(self):
        """Precarga todos los recursos de la lista. Retorna cuántos se guardaron."""
        for url in self.urls:
            self.entries[url] = self.fetcher(url)
        return len(self.entries)

    def respond(self, request):
        if request in self.entries:
            return self.entries[request]

        response = self.fetcher(request)
        if self.store_misses:
            self.entries[request] = response
        return response
