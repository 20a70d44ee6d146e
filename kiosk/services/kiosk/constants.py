"""Customer-facing messages."""

WELCOME_PROMPT = "Hi! Welcome to {restaurant_name}! What's your name?"
WELCOME_BACK = "Welcome back, {name}!"
WELCOME_NEW = "Welcome, {name}!"
FAREWELL = "Bye!"

DISH_PROMPT = "Enter dish name or empty line to finish:"
UNKNOWN_DISH = "Unknown dish name: {line}"

SAME_AS_USUAL_QUESTION = "Same as usual?"
TAKEAWAY_QUESTION = "Takeaway?"
SAVE_ORDER_QUESTION = "Would you like to save this order?"

# Only this exact answer counts as yes
YES_ANSWER = "y"
YES_NO_SUFFIX = "(y/n)"

EMPTY_ORDER = "Your order is empty!"
ORDER_NUMBER = "This is order no. {number}"
RECEIPT = "There you go: {order}, it's going to be {total}"
