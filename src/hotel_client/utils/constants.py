REDIRECT_COUNTDOWN_SECONDS = 5
PAYMENT_SUCCEEDED = "succeeded"
DEFAULT_CURRENCY = "inr"
PHONE_LENGTH = 10
DEFAULT_GUESTS = 1
FEATURED_LIMIT = 8
TRENDING_LIMIT = 6
BOOKINGS_PAGE_SIZE = 10
MY_BOOKINGS_PATH = "/my-bookings"
LOGIN_PATH = "/login"
HOTELS_PATH = "/hotels"
SEARCH_RESULTS_PATH = "/search-results"
