"""User-facing feedback shared by several commands."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSON_NOT_IN_ADDRESSBOOK = "Person could not be found in address book"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_STORAGE_FAILURE = "Could not save the address book: {}"
MESSAGE_STORAGE_LOAD_FAILURE = "Could not load the address book: {}"
