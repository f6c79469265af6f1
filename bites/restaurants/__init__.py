"""
Restaurant directory.

Responsibilities:
- Create restaurants, rejecting name/location pairs already seen.
- List restaurants by average rating and fetch them by id.
- Full-text search over names and JSON details per restaurant.
"""
