from faker import Faker
import pandas as pd

fake = Faker()

data = [
    {
        'id': fake.unique.random_number(digits=5),
        'first_name': fake.first_name(),
        'last_name': fake.last_name(),
        'age': fake.random_int(min=14, max=18),
    }
    for _ in range(50)
]


df = pd.DataFrame(data)
df.to_csv('dummy_students.csv', index=False)
