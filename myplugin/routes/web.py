"""
Web routes.

Define frontend routes here. `routes` receives the router.
"""


def routes(router):
    """Declare the plugin's frontend routes."""
    # Example routes
    # router.get("/products", "ProductController@index").name("products.index")
    # router.get("/products/{id}", "ProductController@show").name("products.show")
    # router.post("/cart/add", "CartController@add").name("cart.add")

    # Route groups
    # router.group("/account", lambda r: r.get("/dashboard", "AccountController@dashboard"))
