from fpl_recommender.server import main

main()
